"""Tests for single-pass multi-pattern substitution."""

import pytest

from textwire.variables.substitution import MultiPatternSubstitutor, substitute


class TestMultiPatternSubstitutor:
    """Test rule priority and scanning behaviour."""

    def test_concatenated_patterns(self):
        """Back-to-back pattern occurrences become back-to-back replacements."""
        rules = {'cat': 'dog', 'red': 'blue', '!': '?'}
        assert substitute('catred!cat', rules) == 'dogblue?dog'

    def test_text_without_patterns_unchanged(self):
        rules = {'foo': 'bar'}
        assert substitute('nothing to see here', rules) == 'nothing to see here'

    def test_empty_input(self):
        assert substitute('', {'a': 'b'}) == ''

    def test_empty_rule_set(self):
        assert substitute('abc', {}) == 'abc'

    def test_later_longer_rule_wins(self):
        """A longer pattern registered after its prefix takes priority."""
        rules = [('a', '1'), ('ab', '2')]
        assert substitute('abab a', rules) == '22 1'

    def test_earlier_longer_rule_loses_to_later_prefix(self):
        """Priority is registration order, not length."""
        rules = [('ab', '2'), ('a', '1')]
        assert substitute('ab', rules) == '1b'

    def test_output_is_not_rescanned(self):
        """Replacements are never substituted again."""
        rules = {'a': 'b', 'b': 'c'}
        assert substitute('ab', rules) == 'bc'

    def test_swap(self):
        """Simultaneous replacement allows swapping two words."""
        rules = {'left': 'right', 'right': 'left'}
        assert substitute('left or right', rules) == 'right or left'

    def test_empty_pattern_skipped(self):
        subst = MultiPatternSubstitutor({'': 'x', 'a': 'b'})
        assert len(subst) == 1
        assert subst.substitute('aaa') == 'bbb'

    def test_no_overlapping_matches(self):
        """A matched span is skipped before scanning resumes."""
        assert substitute('aaa', {'aa': 'X'}) == 'Xa'

    def test_readd_keeps_priority(self):
        subst = MultiPatternSubstitutor([('a', '1'), ('ab', '2')])
        subst.add('a', '3')
        assert subst.rules() == [('a', '3'), ('ab', '2')]
        assert subst.substitute('ab a') == '2 3'

    def test_add_after_substitute(self):
        """Rules added later are picked up by the next call."""
        subst = MultiPatternSubstitutor({'x': 'y'})
        assert subst.substitute('xz') == 'yz'
        subst.add('z', 'w')
        assert subst.substitute('xz') == 'yw'

    def test_replacement_coerced_to_string(self):
        subst = MultiPatternSubstitutor()
        subst.add('n', 5)
        assert subst.substitute('n+n') == '5+5'

    def test_accepts_substitutor_instance(self):
        subst = MultiPatternSubstitutor({'a': 'b'})
        assert substitute('aa', subst) == 'bb'

    @pytest.mark.parametrize("text", ["hello world", "aabbcc", "", "xyz"])
    def test_idempotent_under_empty_rules(self, text):
        rules = {'l': 'L', 'a': 'A', 'bb': 'B'}
        once = substitute(text, rules)
        assert substitute(once, {}) == once

#!/usr/bin/env python3
'''
Unit tests for the feature graph resolver
'''

from pathlib import Path
import sys
import unittest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from targetprops.builtin.archs.x86 import X86_FEATURES
from targetprops.exceptions import UnknownFeatureReference
from targetprops.properties.arch import FeatureVocabulary
from targetprops.resolver.features import compute_enabled_features, forward_closure, reverse_closure


SMALL = FeatureVocabulary([
    'x87',
    ('mmx', ('x87',)),
    ('sse', ('x87', 'mmx')),
])


class TestClosures(unittest.TestCase):
    '''Test forward and reverse closures'''

    def test_forward_closure(self):
        '''Test implied features are pulled in transitively'''
        self.assertEqual(forward_closure(SMALL, {'sse'}), {'sse', 'mmx', 'x87'})
        self.assertEqual(forward_closure(SMALL, set()), set())

    def test_reverse_closure(self):
        '''Test dependents are pulled in transitively'''
        self.assertEqual(reverse_closure(SMALL, {'x87'}), {'x87', 'mmx', 'sse'})
        self.assertEqual(reverse_closure(SMALL, {'sse'}), {'sse'})

    def test_cycle_terminates(self):
        '''Test closures over a cyclic graph reach a fixpoint'''
        vocab = FeatureVocabulary([('a', ('b',)), ('b', ('c',)), ('c', ('a',)), 'd'])
        self.assertEqual(forward_closure(vocab, {'a'}), {'a', 'b', 'c'})
        self.assertEqual(reverse_closure(vocab, {'a'}), {'a', 'b', 'c'})

    def test_duplicate_entries_merge(self):
        '''Test a feature listed twice keeps both sets of implications'''
        vocab = FeatureVocabulary([('a', ('b',)), 'b', 'c', ('a', ('c',))])
        self.assertEqual(vocab['a'], frozenset({'b', 'c'}))
        self.assertEqual(vocab.dependents('c'), frozenset({'a'}))


class TestComputeEnabledFeatures(unittest.TestCase):
    '''Test the full enable/disable resolution'''

    def test_disable_removes_dependents(self):
        '''Disabling x87 also drops mmx, with no error'''
        result = compute_enabled_features(SMALL, {'mmx'}, [('x87', False)], policy = 'error')
        self.assertEqual(result, frozenset())

    def test_enable_pulls_in_implied(self):
        '''Enabling avx pulls in everything it implies'''
        base = {'x87', 'mmx', 'sse', 'sse2'}
        result = compute_enabled_features(X86_FEATURES, base, [('avx', True)], policy = 'error')

        expected = base | {'avx'} | forward_closure(X86_FEATURES, {'avx'})
        self.assertEqual(result, frozenset(expected))
        self.assertEqual(result, frozenset({
            'x87', 'mmx', 'sse', 'sse2', 'avx', 'sse3', 'ssse3',
            'sse4', 'sse4.1', 'sse4.2', 'xsave', 'fxsr',
        }))

    def test_disable_beats_enable(self):
        '''A feature both enabled and disabled ends up disabled'''
        overrides = [('sse', True), ('sse', False)]
        result = compute_enabled_features(SMALL, set(), overrides, policy = 'error')
        self.assertNotIn('sse', result)

        reordered = compute_enabled_features(SMALL, set(), list(reversed(overrides)), policy = 'error')
        self.assertEqual(result, reordered)

    def test_override_order_irrelevant(self):
        '''Test override order does not change the result'''
        overrides = [('avx2', True), ('sse4.2', False), ('mmx', True)]
        first = compute_enabled_features(X86_FEATURES, {'x87'}, overrides, policy = 'error')
        second = compute_enabled_features(X86_FEATURES, {'x87'}, overrides[::-1], policy = 'error')
        self.assertEqual(first, second)
        self.assertNotIn('avx2', first)

    def test_closure_soundness(self):
        '''Every enabled feature has its implications enabled; no disabled dependent survives'''
        overrides = [('avx512f', True), ('sse3', False), ('aes', True)]
        result = compute_enabled_features(X86_FEATURES, {'x87', 'cx8'}, overrides, policy = 'error')

        for name in result:
            self.assertLessEqual(X86_FEATURES.implies(name), result, name)

        disabled = reverse_closure(X86_FEATURES, {'sse3'})
        self.assertFalse(result & disabled)
        self.assertIn('cx8', result)

    def test_returns_frozenset(self):
        '''Test the result is immutable'''
        self.assertIsInstance(compute_enabled_features(SMALL, {'x87'}, policy = 'error'), frozenset)

    def test_unknown_feature_error(self):
        '''Test unknown names raise under the error policy'''
        with self.assertRaises(UnknownFeatureReference) as cm:
            compute_enabled_features(SMALL, {'x87'}, [('avx', True)], arch_name = 'small', policy = 'error')

        self.assertEqual(cm.exception.features, ('avx',))
        self.assertEqual(cm.exception.arch, 'small')

    def test_unknown_feature_ignore(self):
        '''Test unknown names are dropped under the ignore policy'''
        with self.assertLogs('targetprops.resolver.features', level = 'WARNING'):
            result = compute_enabled_features(
                SMALL, {'mmx', 'bogus'}, [('nope', False)], policy = 'ignore',
            )

        self.assertEqual(result, frozenset({'mmx', 'x87'}))


if __name__ == '__main__':
    unittest.main()

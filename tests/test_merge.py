#!/usr/bin/env python3
'''
Unit tests for extended property merging
'''

from pathlib import Path
import sys
import unittest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from targetprops.resolver.merge import merge_properties


class TestMergeProperties(unittest.TestCase):
    '''Test tier precedence'''

    def test_arch_prefix_suppresses_os(self):
        '''OS values do not overwrite existing arch.* keys'''
        result = merge_properties(
            'x86-64',
            [('arch.x.y', 1)],
            [],
            [('arch.x.y', 2), ('os.z', 3)],
            [],
        )
        self.assertEqual(result, {'arch.x.y': 1, 'os.z': 3})

    def test_arch_name_prefix_suppresses_os(self):
        '''OS values do not overwrite existing keys prefixed with the arch name'''
        result = merge_properties(
            'clever',
            [('clever.vec', True)],
            [],
            [('clever.vec', False), ('clever.other', 'os')],
            [],
        )
        self.assertEqual(result, {'clever.vec': True, 'clever.other': 'os'})

    def test_os_overwrites_unscoped(self):
        '''OS values overwrite keys outside the arch scope'''
        result = merge_properties('x86-64', [('rust.abi', 'a')], [], [('rust.abi', 'b')], [])
        self.assertEqual(result, {'rust.abi': 'b'})

    def test_target_beats_arch(self):
        '''Target values win over architecture values'''
        result = merge_properties(
            'x86-64',
            [('arch.k', 1), ('rust.k', 'arch')],
            [],
            [('arch.k', 5)],
            [('arch.k', 2), ('rust.k', 'target')],
        )
        self.assertEqual(result, {'arch.k': 2, 'rust.k': 'target'})

    def test_default_machine_only_without_explicit(self):
        '''Default machine tier applies only when no machine is named'''
        implicit = merge_properties('m', [('k', 'arch')], [('k', 'default')], [], [])
        self.assertEqual(implicit, {'k': 'default'})

        explicit = merge_properties('m', [('k', 'arch')], [('k', 'default')], [], [], [('j', 1)])
        self.assertEqual(explicit, {'k': 'arch', 'j': 1})

    def test_explicit_machine_is_highest(self):
        '''Explicit machine values beat every other tier'''
        result = merge_properties(
            'm',
            [('k', 'arch')],
            [],
            [('k', 'os')],
            [('k', 'target')],
            [('k', 'machine')],
        )
        self.assertEqual(result, {'k': 'machine'})

    def test_fresh_dict(self):
        '''Test each call returns a new map'''
        args = ('m', [('k', 1)], [], [], [])
        first = merge_properties(*args)
        first['k'] = 99
        self.assertEqual(merge_properties(*args), {'k': 1})


if __name__ == '__main__':
    unittest.main()

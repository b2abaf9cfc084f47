#!/usr/bin/env python3
'''
Unit tests for the configuration layer
'''

from pathlib import Path
import logging
import sys
import tempfile
import unittest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from targetprops import resolve, triple as t
from targetprops.common.config import get_config, init_config, unknown_feature_policy
from targetprops.exceptions import UnknownFeatureReference
from targetprops.properties.arch import Machine
from targetprops.triple import EnvId, OsId, Triple


class TestConfig(unittest.TestCase):
    '''Test defaults, files and command-line overrides'''

    def setUp(self):
        get_config().reset()
        self.tmpdir = tempfile.TemporaryDirectory()

    def tearDown(self):
        get_config().reset()
        self.tmpdir.cleanup()

    def write_config(self, text: str) -> Path:
        path = Path(self.tmpdir.name) / 'targetprops.json5'
        path.write_text(text, encoding = 'utf-8')
        return path

    def test_defaults(self):
        config = get_config()
        self.assertEqual(unknown_feature_policy(), 'error')
        self.assertEqual(config.log_level, logging.WARNING)
        self.assertIsNone(config.get('missing'))

    def test_singleton(self):
        from targetprops.common.config import Config
        self.assertIs(Config(), get_config())

    def test_load_json5(self):
        '''JSON5 comments and trailing commas are accepted'''
        path = self.write_config('''
        {
            // drop names we do not know about
            unknown_features: 'ignore',
            log_level: 'debug',
        }
        ''')

        self.assertTrue(get_config().load_file(path))
        self.assertEqual(unknown_feature_policy(), 'ignore')
        self.assertEqual(get_config().log_level, logging.DEBUG)

    def test_missing_file(self):
        self.assertFalse(get_config().load_file(Path(self.tmpdir.name) / 'nope.json5'))

    def test_malformed_file(self):
        path = self.write_config('{ unknown_features: ')
        with self.assertLogs('targetprops.common.config', level = 'WARNING'):
            self.assertFalse(get_config().load_file(path))
        self.assertEqual(unknown_feature_policy(), 'error')

    def test_cli_overrides_file(self):
        '''Command-line values win over file values'''
        path = self.write_config("{ unknown_features: 'ignore' }")
        init_config(['--config', str(path), '--unknown-features', 'error', 'resolve'])
        self.assertEqual(unknown_feature_policy(), 'error')

    def test_invalid_policy(self):
        get_config().set('unknown_features', 'maybe')
        with self.assertRaises(ValueError):
            unknown_feature_policy()

    def test_policy_applies_to_resolution(self):
        '''The configured policy is used when none is passed'''
        target = resolve(Triple(t.X86_64, OsId.LINUX, EnvId.GNU))
        machine = Machine('custom', ('x87', 'warp-drive'))

        with self.assertRaises(UnknownFeatureReference):
            target.enabled_features(machine)

        init_config(['--unknown-features', 'ignore'])
        with self.assertLogs('targetprops.resolver.features', level = 'WARNING'):
            self.assertEqual(target.enabled_features(machine), frozenset({'x87'}))


if __name__ == '__main__':
    unittest.main()

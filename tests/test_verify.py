import itertools
import logging
import unittest
from unittest import mock

import combipack.config as config
import combipack.exc as exc
import combipack.verify
from combipack.config import configure_logging
from combipack.packer import NUM_CODES
from combipack.verify import iter_quadruples, verify


class TestVerify(unittest.TestCase):

    def test_iter_quadruples(self):
        quadruples = list(iter_quadruples())
        self.assertEqual(len(quadruples), NUM_CODES)
        self.assertEqual(len(set(quadruples)), NUM_CODES)
        self.assertEqual(quadruples[0], (31, 31, 31, 31))
        self.assertEqual(quadruples[-1], (0, 0, 0, 0))
        for quadruple in quadruples[::997]:
            self.assertEqual(quadruple, tuple(sorted(quadruple, reverse=True)))

    def test_verify(self):
        with self.assertLogs('combipack.verify', 'INFO') as logs:
            self.assertEqual(verify(), NUM_CODES)
        messages = [record.getMessage() for record in logs.records]
        self.assertIn(f'Verified {config.VERIFY_LOG_INTERVAL} codes.', messages)
        self.assertEqual(messages[-1], f'Verified {NUM_CODES} codes.')

    def test_verify_detects_collision(self):
        first_two = list(itertools.islice(iter_quadruples(), 2))
        with mock.patch.object(combipack.verify, 'encode', return_value=7), \
                mock.patch.object(combipack.verify, 'decode', side_effect=first_two), \
                self.assertLogs('combipack.exc', 'ERROR'):
            with self.assertRaisesRegex(exc.VerificationError, 'already used'):
                verify()

    def test_verify_detects_bad_decode(self):
        with mock.patch.object(combipack.verify, 'decode', return_value=(0, 0, 0, 0)), \
                self.assertLogs('combipack.exc', 'ERROR'):
            with self.assertRaisesRegex(exc.VerificationError, 'different quadruple'):
                verify()


class TestConfigureLogging(unittest.TestCase):

    def test_configure_logging_message(self):
        with mock.patch('logging.config.fileConfig') as file_config, \
                self.assertLogs('combipack.config', 'INFO') as logs:
            configure_logging()
        file_config.assert_called_once()
        self.assertEqual(file_config.call_args[0][0].name, 'logging.conf')
        self.assertEqual([record.getMessage() for record in logs.records], ['Logging is configured.'])

    def test_configure_logging_state(self):
        configure_logging()
        self.assertEqual(logging.getLogger('combipack').level, logging.INFO)
        self.assertTrue(logging.getLogger('combipack.verify').isEnabledFor(logging.INFO))
        self.assertTrue(any(isinstance(h, logging.StreamHandler) for h in logging.getLogger().handlers))


if __name__ == '__main__':
    unittest.main()

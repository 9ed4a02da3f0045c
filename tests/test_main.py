#!/usr/bin/env python3
"""
End-to-end pipeline tests: fetch -> parse -> group -> report
"""

import io
import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import Mock, patch

import requests

from receipt_analyzer.config import RECEIPT_URL_ENV
from receipt_analyzer.errors import ErrorKind, Result
from receipt_analyzer.main import analyze_receipt, main, run


SAMPLE_RECEIPT = (
    '[{"name": "Imported Chocolate Bar", "price": 10.00, "domestic": false, '
    '"description": "Swiss chocolate", "weight": "100"}, '
    '{"name": "Milk", "price": 2.50, "domestic": true, '
    '"description": "Local dairy", "weight": "1000"}]'
)

SAMPLE_REPORT = [
    '. Domestic',
    '... Milk',
    'Price: $2,50',
    'Local dairy',
    'Weight: 1000g',
    '. Imported',
    '... Imported C',
    'Price: $10,00',
    'Swiss chocolate',
    'Weight: 100g',
    'Domestic cost: $2,50',
    'Imported cost: $10,00',
    'Domestic count: 1',
    'Imported count: 1',
]


def _fetcher(result):
    fetcher = Mock()
    fetcher.fetch.return_value = result
    return fetcher


class TestAnalyzeReceipt(unittest.TestCase):
    """Pipeline after the fetch"""

    def test_sample_receipt(self):
        result = analyze_receipt(SAMPLE_RECEIPT)
        self.assertTrue(result.ok)
        self.assertEqual(result.value, SAMPLE_REPORT)

    def test_empty_array_reported_as_parse_failure(self):
        """Known quirk: [] prints the parse failure message"""
        result = analyze_receipt('[]')
        self.assertIs(result.error.kind, ErrorKind.NO_PRODUCTS)
        self.assertEqual(result.error.message, 'Failed to parse receipt details.')

    def test_empty_array_allowed(self):
        result = analyze_receipt('[]', allow_empty=True)
        self.assertTrue(result.ok)
        self.assertEqual(result.value[-2:], ['Domestic count: 0', 'Imported count: 0'])

    def test_malformed_json(self):
        result = analyze_receipt('[{"name": "Milk", "price": "abc"}]')
        self.assertIs(result.error.kind, ErrorKind.PARSE)

    def test_price_with_large_exponent(self):
        result = analyze_receipt('[{"name": "A", "price": 1e1000000}]')
        self.assertTrue(result.ok)
        self.assertIn('Imported cost: $1E+1000000', result.value)

    def test_items_missing_fields(self):
        result = analyze_receipt('[{}, {"name": "Honey", "domestic": true}]')
        self.assertEqual(result.value, [
            '. Domestic',
            '... Honey',
            'Price: $0',
            'N/A',
            'Weight: N/A',
            '. Imported',
            '... N/A',
            'Price: $0',
            'N/A',
            'Weight: N/A',
            'Domestic cost: $0',
            'Imported cost: $0',
            'Domestic count: 1',
            'Imported count: 1',
        ])


class TestRun(unittest.TestCase):
    """Output and exit codes of run()"""

    def _run(self, result, allow_empty=False):
        out = io.StringIO()
        code = run(_fetcher(result), allow_empty=allow_empty, out=out)
        return code, out.getvalue()

    def test_report_printed(self):
        code, output = self._run(Result.success(SAMPLE_RECEIPT))
        self.assertEqual(code, 0)
        self.assertEqual(output, '\n'.join(SAMPLE_REPORT) + '\n')

    def test_transport_error_prints_only_error_line(self):
        code, output = self._run(Result.failure(ErrorKind.TRANSPORT, 'Connection reset'))
        self.assertEqual(output, 'Error: Connection reset\n')
        self.assertEqual(code, 1)

    def test_empty_body(self):
        code, output = self._run(Result.failure(ErrorKind.EMPTY_BODY))
        self.assertEqual(output, 'Failed to fetch receipt details.\n')
        self.assertEqual(code, 2)

    def test_parse_failure(self):
        code, output = self._run(Result.success('{"not": "a list"}'))
        self.assertEqual(output, 'Failed to parse receipt details.\n')
        self.assertEqual(code, 3)

    def test_empty_receipt(self):
        code, output = self._run(Result.success('[]'))
        self.assertEqual(output, 'Failed to parse receipt details.\n')
        self.assertEqual(code, 3)


@patch('receipt_analyzer.main.setup_logger')
@patch('receipt_analyzer.fetcher.requests.get')
class TestMainCli(unittest.TestCase):
    """main() with the HTTP transport mocked"""

    def setUp(self):
        env = patch.dict(os.environ)
        env.start()
        self.addCleanup(env.stop)
        os.environ.pop(RECEIPT_URL_ENV, None)

    def _main(self, argv):
        with patch('sys.stdout', new_callable=io.StringIO) as stdout:
            code = main(argv)
        return code, stdout.getvalue()

    def test_no_arguments(self, mock_get, mock_setup_logger):
        mock_get.return_value = Mock(text=SAMPLE_RECEIPT, status_code=200)

        code, output = self._main([])

        self.assertEqual(code, 0)
        self.assertEqual(output.splitlines(), SAMPLE_REPORT)

    def test_transport_exception(self, mock_get, mock_setup_logger):
        mock_get.side_effect = requests.exceptions.ConnectionError('Name or service not known')

        code, output = self._main([])

        self.assertEqual(output, 'Error: Name or service not known\n')
        self.assertEqual(code, 1)

    def test_url_and_timeout_flags(self, mock_get, mock_setup_logger):
        mock_get.return_value = Mock(text='[{"name": "Tea"}]', status_code=200)

        code, _ = self._main(['--url', 'https://example.com/r', '--timeout', '4'])

        self.assertEqual(code, 0)
        mock_get.assert_called_once_with('https://example.com/r', timeout=4.0)

    def test_allow_empty_flag(self, mock_get, mock_setup_logger):
        mock_get.return_value = Mock(text='[]', status_code=200)

        code, output = self._main(['--allow-empty'])

        self.assertEqual(code, 0)
        self.assertIn('Domestic count: 0', output)

    def test_config_file(self, mock_get, mock_setup_logger):
        mock_get.return_value = Mock(text='[]', status_code=200)
        with tempfile.TemporaryDirectory() as tmp:
            config = Path(tmp) / 'settings.yaml'
            config.write_text("url: https://config.example.com\ntimeout: 7\nallow_empty: true\n")

            code, output = self._main(['--config', str(config)])

        self.assertEqual(code, 0)
        mock_get.assert_called_once_with('https://config.example.com', timeout=7)
        mock_setup_logger.assert_called_once_with('WARNING', None)

    def test_invalid_timeout(self, mock_get, mock_setup_logger):
        with patch('sys.stderr', new_callable=io.StringIO):
            with self.assertRaises(SystemExit) as ctx:
                main(['--timeout', '0'])
        self.assertEqual(ctx.exception.code, 2)
        mock_get.assert_not_called()

    def test_non_finite_timeout(self, mock_get, mock_setup_logger):
        for value in ('nan', 'inf'):
            with self.subTest(timeout=value):
                with patch('sys.stderr', new_callable=io.StringIO):
                    with self.assertRaises(SystemExit) as ctx:
                        main(['--timeout', value])
                self.assertEqual(ctx.exception.code, 2)
        mock_get.assert_not_called()

    def test_unwritable_log_dir(self, mock_get, mock_setup_logger):
        mock_setup_logger.side_effect = NotADirectoryError('Not a directory')
        with patch('sys.stderr', new_callable=io.StringIO) as stderr:
            with self.assertRaises(SystemExit) as ctx:
                main(['--log-dir', 'some/file/logs'])
        self.assertEqual(ctx.exception.code, 2)
        self.assertIn('Cannot write logs to some/file/logs', stderr.getvalue())
        mock_get.assert_not_called()


class TestLogDirOption(unittest.TestCase):
    """--log-dir pointing somewhere that cannot be created"""

    def test_log_dir_under_a_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            blocker = Path(tmp) / 'blocker'
            blocker.write_text('')
            with patch('sys.stderr', new_callable=io.StringIO):
                with self.assertRaises(SystemExit) as ctx:
                    main(['--log-dir', str(blocker / 'logs')])
        self.assertEqual(ctx.exception.code, 2)


if __name__ == '__main__':
    unittest.main()

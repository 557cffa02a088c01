"""
End-to-end tests for the command-line interface
"""

import io
import unittest
import tempfile
import shutil
import sys
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

import matplotlib
matplotlib.use('Agg')
import yaml

# Add parent directory to path
sys.path.append(str(Path(__file__).parent.parent))

from seatsort.cli import build_parser, main
from seatsort.logging_config import setup_logging


class TestCli(unittest.TestCase):

    def setUp(self):
        self.temp_dir = Path(tempfile.mkdtemp())
        self.config_path = self.temp_dir / "config.yaml"
        self.config_path.write_text(yaml.dump({
            "data": {"source": "random", "count": 30, "low": 1, "high": 60, "seed": 3},
            "algorithms": {"classifier": "stable", "sorter": "heap"},
            "layout": {"mode": "left_right", "odd_side": "first", "rows": 0, "cols": 0},
            "output": {"directory": str(self.temp_dir / "out")},
            "logging": {"level": "WARNING"},
        }))

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    def _run(self, *argv):
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            code = main(["--config", str(self.config_path), *argv])
        return code, buffer.getvalue()

    def test_parser_defaults(self):
        args = build_parser().parse_args([])
        self.assertIsNone(args.config)
        self.assertEqual(args.insert, [])
        self.assertFalse(args.plot)

    def test_run_from_config_exports_files(self):
        code, output = self._run()

        self.assertEqual(code, 0)
        self.assertIn("Seat Map", output)
        out_dir = self.temp_dir / "out"
        for name in ("odd.csv", "even.csv", "seat_map.csv"):
            self.assertTrue((out_dir / name).exists(), name)

        seat_rows = (out_dir / "seat_map.csv").read_text().splitlines()
        self.assertEqual(len(seat_rows), 5)
        self.assertTrue(all(len(row.split(",")) == 6 for row in seat_rows))

    def test_csv_input_with_overrides(self):
        data_path = self.temp_dir / "values.csv"
        data_path.write_text(",".join(str(i) for i in range(1, 25)))

        code, output = self._run("--input", str(data_path), "--mode", "front_back",
                                 "--odd-side", "second", "--rows", "2", "--cols", "12",
                                 "--output-name", "fb")
        self.assertEqual(code, 0)

        seat_rows = (self.temp_dir / "out" / "fb_seat_map.csv").read_text().splitlines()
        self.assertEqual(seat_rows[0], ",".join(str(i) for i in range(2, 25, 2)))
        self.assertEqual(seat_rows[1], ",".join(str(i) for i in range(1, 24, 2)))

    def test_insert_after_run(self):
        code, output = self._run("--insert", "1000", "--insert", "-3", "--no-export")

        self.assertEqual(code, 0)
        self.assertIn("Inserted 1000", output)
        self.assertIn("Inserted -3", output)
        self.assertFalse((self.temp_dir / "out").exists())

    def test_benchmark_and_plot(self):
        code, output = self._run("--benchmark", "--plot", "--classifier", "two_pointer")

        self.assertEqual(code, 0)
        self.assertIn("Benchmark (two_pointer / heap)", output)
        self.assertTrue((self.temp_dir / "out" / "seat_map.png").exists())

    def test_too_few_values_reports_error(self):
        code, output = self._run("--random", "5")
        self.assertEqual(code, 1)
        self.assertIn("Error:", output)

    def test_values_typed_on_command_line(self):
        values = " ".join(str(i) for i in range(1, 21))
        code, output = self._run("--values", values, "--rows", "2", "--cols", "10",
                                 "--output-name", "typed")
        self.assertEqual(code, 0)

        seat_rows = (self.temp_dir / "out" / "typed_seat_map.csv").read_text().splitlines()
        self.assertEqual(seat_rows[0], "1,3,5,7,9,2,4,6,8,10")
        self.assertEqual(seat_rows[1], "11,13,15,17,19,12,14,16,18,20")

    def test_values_with_bad_token_reports_error(self):
        code, output = self._run("--values", "1 2 three", "--no-export")
        self.assertEqual(code, 1)
        self.assertIn("Not an integer", output)

    def test_values_excludes_other_sources(self):
        with self.assertRaises(SystemExit):
            with redirect_stderr(io.StringIO()):
                build_parser().parse_args(["--values", "1 2", "--random", "30"])

    def test_show_config_prints_summary(self):
        code, output = self._run("--show-config", "--no-export")
        self.assertEqual(code, 0)
        self.assertIn("CONFIGURATION SUMMARY", output)
        self.assertIn("Classifier: stable", output)
        self.assertIn("Configuration is valid", output)
        self.assertLess(output.index("CONFIGURATION SUMMARY"), output.index("Seat Map"))

    def test_unreadable_input_reports_error(self):
        code, output = self._run("--input", str(self.temp_dir), "--no-export")
        self.assertEqual(code, 1)
        self.assertIn("Error:", output)

    def test_invalid_config_reports_error(self):
        self.config_path.write_text(yaml.dump({"layout": {"mode": "diagonal"}}))
        code, output = self._run("--no-export")
        self.assertEqual(code, 1)
        self.assertIn("layout mode", output)


class TestLoggingSetup(unittest.TestCase):

    def setUp(self):
        self.temp_dir = Path(tempfile.mkdtemp())

    def tearDown(self):
        setup_logging("WARNING")
        shutil.rmtree(self.temp_dir)

    def test_repeat_setup_closes_previous_handlers(self):
        logger = setup_logging("INFO", str(self.temp_dir / "first.log"))
        file_handlers = [h for h in logger.handlers if hasattr(h, "baseFilename")]
        self.assertEqual(len(file_handlers), 1)
        first = file_handlers[0]
        self.assertIsNotNone(first.stream)

        logger = setup_logging("INFO", str(self.temp_dir / "second.log"))

        self.assertIsNone(first.stream)
        self.assertNotIn(first, logger.handlers)
        self.assertEqual(len(logger.handlers), 2)

    def test_file_handler_writes_messages(self):
        log_path = self.temp_dir / "run.log"
        logger = setup_logging("DEBUG", str(log_path))
        logger.info("hello")
        setup_logging("WARNING")

        self.assertIn("hello", log_path.read_text())


if __name__ == '__main__':
    unittest.main()

"""
Smoke tests for the benchmark driver.
"""

import logging

from pymatrix.benchmark import build_parser, configure_logging, main, run_benchmark


class TestBenchmark:

    def test_run_benchmark_checks_pass(self):
        timer, checks = run_benchmark(n=12, block_size=4, num_workers=3, seed=1)
        assert all(checks.values()), checks
        names = [name for name, _ in timer.sections()]
        assert names[0] == 'Matrix Multiply'
        assert 'Cholesky (parallel)' in names
        assert len(names) == 8

    def test_main_prints_table(self, capsys):
        assert main(['-n', '10', '-b', '3', '-w', '2']) == 0
        out = capsys.readouterr().out
        assert "Benchmarking 10 x 10 matrices (block=3, workers=2)." in out
        assert "Matrix Inverse (parallel)" in out
        assert "FAIL" not in out

    def test_parser_defaults(self):
        args = build_parser().parse_args([])
        assert args.size == 120
        assert args.block_size is None
        assert args.seed == 42
        assert not args.verbose

    def test_configure_logging_is_idempotent(self):
        configure_logging(verbose=True)
        configure_logging(verbose=False)
        root = logging.getLogger('pymatrix')
        streams = [h for h in root.handlers if isinstance(h, logging.StreamHandler)]
        assert len(streams) == 1
        assert root.level == logging.INFO

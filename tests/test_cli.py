"""
Command-line entry point tests.
"""

import signal

import pytest

from arcball import Animation, AnimationState, Ellipse, Parabola, TrailMode
from arcball.cli import build_animation, build_parser, install_stop_handlers, main, setup_logging


def parse(*argv):
    return build_parser().parse_args(list(argv))


class TestParser:

    def test_defaults(self):
        args = parse()
        assert args.shape == "ellipse"
        assert args.params is None
        assert (args.fps, args.points, args.duration, args.width) == (10, 4, 100, 100)
        assert args.resolution is None
        assert args.mode == "trail"
        assert not args.redraw

    def test_build_animation(self):
        animation = build_animation(parse(
            "--shape", "parabola", "--params", "60", "40", "1.0",
            "--fps", "20", "--points", "6", "--width", "80", "--resolution", "40",
            "--mode", "uniform",
        ))
        assert isinstance(animation.curve, Parabola)
        assert animation.curve.params.x_extent == 60.0
        assert animation.config.point_count == 6
        assert animation.config.mode is TrailMode.UNIFORM
        assert animation.curve.step == 2.0

    def test_default_shape_is_ellipse(self):
        assert isinstance(build_animation(parse()).curve, Ellipse)


class TestMain:

    def test_runs_bounded_animation(self, capsys):
        status = main(["--fps", "20", "--duration", "0.2", "--width", "20", "--points", "2"])

        out = capsys.readouterr().out
        lines = out.split("\n")[:-1]
        assert status == 0
        assert len(lines) == 4
        assert all(len(line) == 20 for line in lines)

    def test_zero_duration_prints_nothing(self, capsys):
        assert main(["--duration", "0"]) == 0
        assert capsys.readouterr().out == ""

    def test_wrong_param_count_is_usage_error(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["--params", "1", "2"])
        assert excinfo.value.code == 2
        assert "invalid parameters" in capsys.readouterr().err

    def test_resolution_above_width_is_usage_error(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["--resolution", "50", "--width", "10"])
        assert excinfo.value.code == 2
        assert "exceeds output_width" in capsys.readouterr().err

    def test_curvature_below_one_is_usage_error(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["--shape", "parabola", "--params", "75", "50", "0.5"])
        assert excinfo.value.code == 2
        assert "curvature_constant" in capsys.readouterr().err

    def test_output_failure_exits_one(self, monkeypatch):
        def broken_run(self):
            raise BrokenPipeError("stdout closed")

        monkeypatch.setattr(Animation, "run", broken_run)
        assert main(["--duration", "1"]) == 1

    def test_signal_handlers_restored(self):
        before = signal.getsignal(signal.SIGINT)
        main(["--duration", "0"])
        assert signal.getsignal(signal.SIGINT) is before


class TestLogging:

    @pytest.mark.parametrize("flags, level", [
        ([], "INFO"),
        (["-v"], "DEBUG"),
        (["-vv"], "TRACE"),
        (["-vvv"], "TRACE"),
    ])
    def test_verbosity_levels(self, flags, level):
        assert setup_logging(parse(*flags).verbose) == level

    def test_double_verbose_traces_every_frame(self, capsys):
        main(["--fps", "20", "--duration", "0.1", "--width", "10", "-vv"])
        captured = capsys.readouterr()
        assert captured.err.count("tick=") == 2
        assert "tick=" not in captured.out

    def test_default_level_hides_reversals(self, capsys):
        main(["--fps", "20", "--duration", "0.1", "--width", "10"])
        err = capsys.readouterr().err
        assert "Starting ellipse animation" in err
        assert "Reversal" not in err


def test_sigint_requests_stop():
    animation = build_animation(parse("--duration", "-1"))
    previous = install_stop_handlers(animation)
    try:
        signal.raise_signal(signal.SIGINT)
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler)

    assert animation.should_stop()
    assert list(animation.frames()) == []
    assert animation.state is AnimationState.STOPPED

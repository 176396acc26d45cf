import logging

import pytest

from tictactoe_frontend.app import apply_default_palette, build_parser, resolve_log_level, PRIMARY_COLOR


def test_parser_defaults():
    ns = build_parser().parse_args([])
    assert ns.log_level == "WARNING"
    assert not ns.verbose


def test_parser_leaves_qt_args():
    ns, rest = build_parser().parse_known_args(["-v", "-platform", "offscreen"])
    assert ns.verbose
    assert rest == ["-platform", "offscreen"]


def test_parser_rejects_unknown_level():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--log-level", "LOUD"])


def test_palette_applied(qapp):
    apply_default_palette(qapp)
    assert qapp.palette().highlight().color() == PRIMARY_COLOR
    assert "restartBtn" in qapp.styleSheet()


def test_log_level_defaults_to_warning():
    ns = build_parser().parse_args([])
    assert resolve_log_level(ns) == logging.WARNING


def test_log_level_from_flag():
    ns = build_parser().parse_args(["--log-level", "INFO"])
    assert resolve_log_level(ns) == logging.INFO


@pytest.mark.parametrize("args", [["-v"], ["--verbose", "--log-level", "ERROR"]])
def test_verbose_means_debug(args):
    ns = build_parser().parse_args(args)
    assert resolve_log_level(ns) == logging.DEBUG

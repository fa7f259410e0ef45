import json

import pytest

from tenshades.main import main


@pytest.fixture(autouse=True)
def truecolor_env(monkeypatch):
    monkeypatch.setenv("COLORTERM", "truecolor")


def _run_json(capsys, *argv):
    main([*argv, "--output", "json"])
    return json.loads(capsys.readouterr().out)


def test_positional_color_json(capsys):
    palette = _run_json(capsys, "#ea1863")
    assert list(palette) == ["50", "100", "200", "300", "400", "500", "600", "700", "800", "900"]
    assert palette["500"] == "#ea1863"


def test_color_option_with_format_and_shade(capsys):
    palette = _run_json(capsys, "--color", "#ea1863", "--format", "hsl", "--shade", "400")
    assert palette["400"] == "hsl(339, 0.83, 0.51)"


def test_unknown_format_falls_back_to_hex(capsys):
    palette = _run_json(capsys, "#ea1863", "-f", "cmyk")
    assert all(value.startswith("#") for value in palette.values())


def test_prettyjson_is_indented(capsys):
    main(["#fff", "-f", "rgb", "-o", "prettyjson"])
    out = capsys.readouterr().out
    assert '    "50": "rgb(255, 255, 255)"' in out


def test_random_is_reproducible_with_seed(capsys):
    first = _run_json(capsys, "--random", "--seed", "7")
    second = _run_json(capsys, "--random", "--seed", "7")
    assert first == second
    assert len(first) == 10


def test_text_output_lists_every_label(capsys):
    main(["#ea1863", "--hide-blocks"])
    out = capsys.readouterr().out
    assert "#ea1863" in out
    assert "\033[48;2;" not in out
    for label in ("50", "500", "900"):
        assert label in out


def test_text_output_draws_blocks(capsys):
    main(["#fff"])
    out = capsys.readouterr().out
    assert "\033[48;2;255;255;255m" in out
    assert "#fff" in out


@pytest.mark.parametrize(
    "argv, message",
    [
        (["zz1863"], "'zz1863' is not a valid hexadecimal color"),
        (["#ea1863ff"], "please provide an opaque entry value"),
        (["#ea1863", "--shade", "450"], "invalid shade"),
        (["#ea1863", "--shade", "-400"], "invalid shade"),
        (["#ea1863", "--color", "#fff"], "not allowed with argument"),
    ],
)
def test_invalid_input_exits_with_usage_error(capsys, argv, message):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 2
    assert message in capsys.readouterr().err


def test_missing_color_prints_usage_only(capsys):
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 2
    captured = capsys.readouterr()
    assert "[error]" not in captured.err
    assert "usage: tenshades" in captured.out


def test_version(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--version"])
    assert exc.value.code == 0
    assert "tenshades" in capsys.readouterr().out

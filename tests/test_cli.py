import logging

import pandas as pd
import pytest

from main import _pick_category, main
from unitwise import Distance, Rotation, Speed, UnresolvedSymbolError


@pytest.fixture(autouse=True)
def _drop_cli_handlers():
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()


def test_convert_infers_category(capsys):
    assert main(["convert", "1", "km", "m"]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "1000 m"


def test_convert_with_explicit_category(capsys):
    assert main(["convert", "100", "C", "F", "--category", "temperature"]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "212 F"


def test_convert_shared_symbol_takes_first_category():
    assert _pick_category("d", "deg") is Rotation
    assert _pick_category("km/h", "c") is Speed
    assert _pick_category("ft", "m") is Distance


def test_convert_unknown_symbol_fails(capsys):
    assert main(["convert", "1", "furlong", "m"]) == 2
    assert "No unit in any category matches symbol 'furlong'" in capsys.readouterr().out


def test_symbol_unknown_everywhere_has_no_category():
    with pytest.raises(UnresolvedSymbolError) as info:
        _pick_category("m", "furlong")
    assert info.value.symbol == "furlong"
    assert info.value.category is None


def test_convert_incompatible_symbols_fails(capsys):
    assert main(["convert", "1", "km", "kg"]) == 2
    assert "No category resolves both" in capsys.readouterr().out


def test_table_csv_export(tmp_path):
    csv_path = tmp_path / "distance.csv"
    assert main(["table", "distance", "--csv", str(csv_path)]) == 0
    table = pd.read_csv(csv_path)
    assert len(table) == 12
    assert "Symbol" in table.columns


def test_table_unknown_category_fails():
    assert main(["table", "luminosity"]) == 2


def test_arc_to_metres(capsys):
    assert main(["arc", "to-metres", "60"]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "1852 m"


def test_arc_to_arc_seconds_at_latitude(capsys):
    assert main(["arc", "to-arc-seconds", "1852", "--latitude", "60"]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "30 arcsec"


def test_clamp_caps_at_planck(capsys):
    assert main(["clamp", "1e40", "K"]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "1.42e+35 K"


def test_clamp_floors_at_absolute_zero(capsys):
    assert main(["clamp", "-500", "°C"]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "-273.15 C"


def test_log_file_is_written(tmp_path):
    log_path = tmp_path / "run.log"
    assert main(["--log-file", str(log_path), "convert", "2", "h", "s"]) == 0
    assert "Converting 2 HOUR -> SECOND" in log_path.read_text()

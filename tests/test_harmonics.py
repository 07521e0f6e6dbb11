import io

import pytest

from astroforge.harmonics import EGM, Harmonic, read_harmonics

CSV_TEXT = (
    "i,j,ci,cj,di,dj\n"
    "2,0,-4.84165371736e-04,0.0,3.561e-11,0.0\n"
    "2,1,-1.86987635955e-10,1.19528012031e-09,1.0e-11,1.0e-11\n"
    "30,30,1.5e-08,-2.5e-08,3.0e-10,4.0e-10\n"
)


@pytest.fixture
def model_file(tmp_path):
    path = tmp_path / "model.csv"
    path.write_text(CSV_TEXT, encoding="utf-8")
    return path


def test_read_harmonics_rows():
    rows = list(read_harmonics(io.StringIO(CSV_TEXT)))
    assert len(rows) == 3
    assert rows[0] == Harmonic(2, 0, -4.84165371736e-04, 0.0, 3.561e-11, 0.0)
    assert (rows[2].i, rows[2].j) == (30, 30)


def test_egm_lookup(model_file):
    model = EGM.from_file(model_file)
    assert model.path == str(model_file)
    assert model.coefficients(30, 30) == (1.5e-08, -2.5e-08)
    assert model.errors(30, 30) == (3.0e-10, 4.0e-10)
    assert model.coefficients(2, 1) == (-1.86987635955e-10, 1.19528012031e-09)


def test_egm_missing_entry(model_file):
    model = EGM.from_file(model_file)
    with pytest.raises(KeyError):
        model.coefficients(5, 5)


def test_egm_duplicates_keep_last(tmp_path):
    path = tmp_path / "dup.csv"
    path.write_text(
        "i,j,ci,cj,di,dj\n3,1,1.0,2.0,0.1,0.2\n3,1,5.0,6.0,0.5,0.6\n",
        encoding="utf-8",
    )
    model = EGM.from_file(path)
    assert model.coefficients(3, 1) == (5.0, 6.0)
    assert model.errors(3, 1) == (0.5, 0.6)


def test_missing_column_raises():
    with pytest.raises(ValueError):
        list(read_harmonics(io.StringIO("i,j,ci,cj,di\n1,1,0,0,0\n")))


def test_bad_value_raises():
    with pytest.raises(ValueError):
        list(read_harmonics(io.StringIO("i,j,ci,cj,di,dj\n1,1,abc,0,0,0\n")))


def test_negative_index_raises():
    with pytest.raises(ValueError):
        list(read_harmonics(io.StringIO("i,j,ci,cj,di,dj\n-1,1,0,0,0,0\n")))


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        EGM.from_file(tmp_path / "absent.csv")
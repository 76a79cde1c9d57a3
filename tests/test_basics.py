import pytest

from cppstart.basics import User, main, report


def test_describe_formats_fields():
    user = User(10000, 18, "ABC", "m", "M1")
    assert user.describe() == (
        "name = ABC, gender = m, code = M1, age = 18, salary = 10000.000000"
    )


def test_struct_size_is_padded_to_double_alignment():
    size = User(1.0, 1, "x", "f", "A").struct_size()
    assert size % 8 == 0
    assert size >= 36


def test_struct_size_does_not_depend_on_contents():
    short = User(1.0, 1, "x", "f", "A")
    long = User(99999.5, 70, "a" * 19, "m", "ZZ")
    assert short.struct_size() == long.struct_size()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"name": "n" * 20},
        {"code": "ABC"},
        {"gender": "mf"},
        {"gender": ""},
    ],
)
def test_invalid_fields_rejected(kwargs):
    fields = {"salary": 1.0, "age": 1, "name": "A", "gender": "m", "code": "C1"}
    fields.update(kwargs)
    with pytest.raises(ValueError):
        User(**fields)


def test_report_lines():
    lines = report().splitlines()
    assert lines[:5] == ["a = a", "b = b", "c = c", "d = d", "e = e"]
    assert "a3 = 12.250000" in lines
    assert lines[-2].startswith("u1.name = ABC, gender = m, code = M1, age = 18")


def test_report_size_line_matches_struct_size():
    last = report().splitlines()[-1]
    size = User(10000, 18, "ABC", "m", "M1").struct_size()
    assert last == f"sizeof(u1) = {size}"


def test_main_prints_report(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == report() + "\n"
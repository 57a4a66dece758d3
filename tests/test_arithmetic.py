import pytest

from cursorlists import arithmetic
from cursorlists.bigint import BigInteger

G = arithmetic.arithmetic_gauntlet
ADD = arithmetic.Test.TEST_3
SUB = arithmetic.Test.TEST_4


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("+111122223333", "+222211110000", "+333333333333"),
        ("+111122223333", "-110122223333", "1000000000"),
        ("+111122223333", "-112122223333", "-1000000000"),
        ("-221211110000", "-112122223333", "-333333333333"),
    ],
)
def test_add_cases(a, b, expected):
    assert G(BigInteger(a), BigInteger(b), ADD) == BigInteger(expected)


def test_add_to_zero():
    result = G(BigInteger("+111122223333"), BigInteger("-111122223333"), ADD)
    assert result.sign() == 0


def test_add_assign():
    a = BigInteger("+111122223333")
    a += BigInteger("-112122223333")
    assert a.sign() == -1
    assert a == BigInteger("-1000000000")


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("+111122223333", "121122223333", "-10000000000"),
        ("+111122223333", "101122223333", "10000000000"),
        ("+111122223333", "-101122223333", "212244446666"),
        ("-101122223333", "+111122223333", "-212244446666"),
        ("-111122223333", "-112122223333", "1000000000"),
        ("-111122223333", "-110122223333", "-1000000000"),
        ("-111122223333", "110122223333", "-221244446666"),
    ],
)
def test_subtract_cases(a, b, expected):
    result = G(BigInteger(a), BigInteger(b), SUB)
    assert result == BigInteger(expected)
    assert result.sign() == BigInteger(expected).sign()


@pytest.mark.parametrize("text", ["+111122223333", "-111122223333"])
def test_subtract_equal_is_zero(text):
    assert G(BigInteger(text), BigInteger(text), SUB).sign() == 0
    assert G(BigInteger(text), BigInteger(text), arithmetic.Test.TEST_5).sign() == 0


@pytest.mark.parametrize(
    "a, b, sign",
    [
        ("99", -100, -1),
        ("-882133", 659179, -1),
        (99999999, -99999999, 0),
        ("99", 100000009, 1),
    ],
)
def test_addition_signs(a, b, sign):
    assert G(BigInteger(a), BigInteger(b), ADD).sign() == sign


@pytest.mark.parametrize(
    "a, b, sign",
    [(200, 11, 1), (200, -11, -1), (-200, -11, 1), (-200, 11, -1), (200, 0, 0), (100, -100, -1)],
)
def test_multiplication_signs(a, b, sign):
    assert G(BigInteger(a), BigInteger(b), arithmetic.Test.TEST_7).sign() == sign


A_TEXT = "123456789012345678901"
B_TEXT = "-98765432109876543210"


def _expected(test, a, b):
    return {
        arithmetic.Test.TEST_1: a,
        arithmetic.Test.TEST_2: b,
        arithmetic.Test.TEST_3: a + b,
        arithmetic.Test.TEST_4: a - b,
        arithmetic.Test.TEST_5: 0,
        arithmetic.Test.TEST_6: 3 * a - 2 * b,
        arithmetic.Test.TEST_7: a * b,
        arithmetic.Test.TEST_8: a * a,
        arithmetic.Test.TEST_9: b * b,
        arithmetic.Test.TEST_10: 9 * a**4 + 16 * b**5,
    }[test]


@pytest.mark.parametrize("test", list(arithmetic.Test))
def test_gauntlet_matches_builtin_ints(test):
    result = G(BigInteger(A_TEXT), BigInteger(B_TEXT), test)
    assert str(result) == str(_expected(test, int(A_TEXT), int(B_TEXT)))


def test_invalid_test_raises():
    with pytest.raises(ValueError, match="Invalid test"):
        G(BigInteger(1), BigInteger(2), "TEST_11")


def test_run_writes_ten_blocks(tmp_path):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    source.write_text(f"{A_TEXT}\n\n{B_TEXT}\n")
    results = arithmetic.run(str(source), str(target))
    text = target.read_text()
    assert text.endswith("\n\n")
    blocks = text[:-2].split("\n\n")
    assert blocks == [str(r) for r in results]
    assert len(blocks) == 10
    assert blocks[0] == A_TEXT
    assert blocks[1] == B_TEXT


def test_run_accepts_missing_final_newline(tmp_path):
    source = tmp_path / "in.txt"
    source.write_text("5\nignored\n-7")
    results = arithmetic.run(str(source), str(tmp_path / "out.txt"))
    assert str(results[1]) == "-7"


def test_run_rejects_short_file(tmp_path):
    source = tmp_path / "in.txt"
    source.write_text("5\n\n")
    with pytest.raises(arithmetic.GauntletError, match="Input file format is incorrect."):
        arithmetic.run(str(source), str(tmp_path / "out.txt"))


def test_run_rejects_missing_file(tmp_path):
    with pytest.raises(arithmetic.GauntletError, match="Cannot read file."):
        arithmetic.run(str(tmp_path / "absent.txt"), str(tmp_path / "out.txt"))


def test_run_rejects_non_numeric(tmp_path):
    source = tmp_path / "in.txt"
    source.write_text("12a\n\n3\n")
    with pytest.raises(ValueError):
        arithmetic.run(str(source), str(tmp_path / "out.txt"))


def test_main_wrong_argument_count(capsys):
    assert arithmetic.main(["only-one"]) == 1
    assert capsys.readouterr().err == "Arithmetic: Wrong number of arguments.\n"


def test_main_unreadable_input(tmp_path, capsys):
    assert arithmetic.main([str(tmp_path / "absent"), str(tmp_path / "out")]) == 1
    assert capsys.readouterr().err == "Arithmetic: Cannot read file.\n"


def test_main_success(tmp_path):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    source.write_text("-12\n\n34\n")
    assert arithmetic.main([str(source), str(target)]) == 0
    assert target.read_text().startswith("-12\n\n34\n\n")
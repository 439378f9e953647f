import pytest

from slurm_expand.lib import FormatError, expand_tasks


def test_tasks_single():
    assert expand_tasks("2") == [2]


def test_tasks_repeat():
    assert expand_tasks("12(x3)") == [12, 12, 12]


def test_tasks_mixed():
    assert expand_tasks("12(x2),7(x3),4") == [12, 12, 7, 7, 7, 4]


def test_tasks_zero_repeat():
    assert expand_tasks("5(x0)") == []
    assert expand_tasks("1,5(x0),2") == [1, 2]


def test_tasks_zero_count():
    assert expand_tasks("0,3") == [0, 3]


@pytest.mark.parametrize(
    "expr, token",
    [
        ("", ""),
        ("2,x", "x"),
        ("3(x)", "3(x)"),
        ("3(x2", "3(x2"),
        ("-1", "-1"),
        ("2, 3", " 3"),
        ("2,,3", ""),
        ("a3(x2)", "a3(x2)"),
    ],
)
def test_tasks_malformed(expr, token):
    with pytest.raises(FormatError) as excinfo:
        expand_tasks(expr)
    assert excinfo.value.expression == token

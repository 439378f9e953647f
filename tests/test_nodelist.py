import pytest

from slurm_expand.lib import FormatError, expand_nodelist


def test_nodelist_no_brackets():
    assert expand_nodelist("node10") == ["node10"]


def test_nodelist_range():
    assert expand_nodelist("node[5-6]") == ["node5", "node6"]


def test_nodelist_range_with_suffix():
    assert expand_nodelist("node[5-6]abc") == ["node5abc", "node6abc"]


def test_nodelist_range_at_start():
    assert expand_nodelist("[1-3]-ib") == ["1-ib", "2-ib", "3-ib"]


def test_nodelist_single_value_range():
    assert expand_nodelist("node[5-5]") == ["node5"]


def test_nodelist_leading_zeros_dropped():
    assert expand_nodelist("cn[08-10]") == ["cn8", "cn9", "cn10"]


def test_nodelist_dash_in_prefix():
    assert expand_nodelist("cn-d[1-2]") == ["cn-d1", "cn-d2"]


@pytest.mark.parametrize(
    "expr",
    [
        "node[5-6",
        "node5-6]",
        "node]5-6[",
        "node[5]",
        "node[a-b]",
        "node[5-]",
        "node[-5]",
        "node[5-6-7]",
        "node[6-5]",
        "n[1-2]x[3-4]",
    ],
)
def test_nodelist_malformed(expr):
    with pytest.raises(FormatError) as excinfo:
        expand_nodelist(expr)
    assert excinfo.value.expression == expr
    assert expr in str(excinfo.value)


def test_nodelist_format_error_is_value_error():
    with pytest.raises(ValueError):
        expand_nodelist("node[x-y]")

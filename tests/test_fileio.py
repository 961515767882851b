import pytest

from chefdispatch.errors import InvalidInputError
from chefdispatch.fileio import build_roster, format_report, parse_input, read_input, write_report
from chefdispatch.models import ChefClass, OrderClass
from chefdispatch.sim.engine import run_simulation
from chefdispatch.sim.metrics import summarize

SAMPLE = """\
2 1 1
1 1 2
8
N 0 1 5 0
V 0 2 3 120
G 1 3 4 0
N 1 4 6 0
N 2 5 2 0
V 3 6 8 300
N 3 7 4 0
G 5 8 3 0
"""

SAMPLE_REPORT = """\
FT ID RT WT ST
3 2 0 0 3
4 4 1 0 3
5 1 0 0 5
5 3 1 0 4
5 5 2 2 1
8 8 5 0 3
9 7 3 2 4
11 6 3 0 8

Summary:
Orders: 8 (Normal=4 Vegan=2 VIP=2)
Chefs: Normal=2 Vegan=1 VIP=1
Average Waiting Time: 0.5
Average Service Time: 3.875
% Auto-promoted: 0
"""


def test_parse_input_builds_orders_and_roster():
    orders, chefs = parse_input(SAMPLE)
    assert len(orders) == 8
    assert [c.chef_class for c in chefs] == [ChefClass.NORMAL, ChefClass.NORMAL, ChefClass.VEGAN, ChefClass.VIP]
    assert [c.id for c in chefs] == [1, 2, 3, 4]
    assert chefs[3].speed == 2.0
    first_vip = orders[1]
    assert (first_vip.id, first_vip.order_class, first_vip.arrival_time, first_vip.size, first_vip.money) == (
        2, OrderClass.VIP, 0, 3, 120.0,
    )


def test_unknown_type_code_means_normal():
    orders, _ = parse_input("1 0 0\n1 1 1\n1\nX 0 1 2 0\n")
    assert orders[0].order_class is OrderClass.NORMAL


def test_sample_report_matches_expected_text():
    orders, chefs = parse_input(SAMPLE)
    result = run_simulation(orders, chefs)
    summary = summarize(result.orders, result.chefs, result.promotions)
    assert format_report(result.orders, summary) == SAMPLE_REPORT


def test_read_and_write_files(tmp_path):
    src = tmp_path / "input.txt"
    src.write_text(SAMPLE, encoding="utf-8")
    orders, chefs = read_input(src)
    result = run_simulation(orders, chefs)
    out = write_report(tmp_path / "output.txt", result.orders, summarize(result.orders, result.chefs, 0))
    assert out.read_text(encoding="utf-8") == SAMPLE_REPORT


@pytest.mark.parametrize(
    "text",
    [
        "",
        "1 1 1\n1 1 1\n2\nN 0 1 5 0\n",
        "1 1 x\n1 1 1\n0\n",
        "1 0 0\n1 1 1\n1\nN zero 1 5 0\n",
        "1 0 0\n1 1 1\n-1\n",
    ],
)
def test_malformed_input_rejected(text):
    with pytest.raises(InvalidInputError):
        parse_input(text)


def test_negative_chef_count_rejected():
    with pytest.raises(InvalidInputError):
        build_roster([1, -1, 0], [1.0, 1.0, 1.0])


@pytest.mark.parametrize("money", ["nan", "inf"])
def test_non_finite_money_from_file_rejected_before_running(money):
    text = f"1 0 0\n1 1 1\n3\nV 0 1 1 100\nV 0 2 1 {money}\nV 0 3 1 300\n"
    orders, chefs = parse_input(text)
    with pytest.raises(InvalidInputError):
        run_simulation(orders, chefs)

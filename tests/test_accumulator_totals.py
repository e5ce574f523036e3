import pytest

from bud.accumulator import Bucket, CategoryAccumulator, Ordering
from bud.api import summarize
from bud.totals import Totals, calculate_totals


def _fill(acc: CategoryAccumulator, entries):
    for category, cents in entries:
        acc.add_entry(category, cents)
    return acc


ENTRIES = [("Food", 1050), ("Rent", -80000), ("Food", 500), ("Salary", 250000), ("Rent", 100)]


def test_default_order_lists_most_recent_category_first():
    # Prepend order: a new category is listed above all
    # categories seen before it; later entries never move a bucket.
    acc = _fill(CategoryAccumulator(), ENTRIES)
    assert acc.order is Ordering.RECENT_FIRST
    assert acc.buckets() == [
        Bucket("Salary", 250000),
        Bucket("Rent", -79900),
        Bucket("Food", 1550),
    ]


def test_first_seen_order_lists_categories_as_introduced():
    acc = _fill(CategoryAccumulator(order=Ordering.FIRST_SEEN), ENTRIES)
    assert [b.category for b in acc] == ["Food", "Rent", "Salary"]


def test_ordering_accepts_cli_values():
    assert CategoryAccumulator(order="first-seen").order is Ordering.FIRST_SEEN


def test_category_names_are_case_sensitive():
    acc = _fill(CategoryAccumulator(), [("food", 100), ("Food", 200), ("food", 1)])
    assert len(acc) == 2
    assert acc.total_for("food") == 101
    assert acc.total_for("Food") == 200


def test_membership_and_unknown_category():
    acc = _fill(CategoryAccumulator(), [("Food", 100)])
    assert "Food" in acc
    assert "Rent" not in acc
    with pytest.raises(KeyError):
        acc.total_for("Rent")


def test_totals_partition_by_sign_with_zero_counted_positive():
    buckets = [Bucket("A", 0), Bucket("B", 300), Bucket("C", -120), Bucket("D", -5)]
    totals = calculate_totals(buckets)
    assert totals == Totals(positive=300, negative=-125)
    assert totals.grand == 175


def test_totals_of_nothing_are_zero():
    assert calculate_totals([]) == Totals(0, 0)


@pytest.mark.parametrize(
    "entries",
    [
        ENTRIES,
        [("A", -1), ("B", -2), ("A", 3)],
        [("A", 0)],
        [],
    ],
)
def test_positive_plus_negative_equals_grand_total(entries):
    acc = _fill(CategoryAccumulator(), entries)
    totals = calculate_totals(acc)
    assert totals.positive + totals.negative == acc.grand_total()
    assert acc.grand_total() == sum(c for _, c in entries)


def test_summarize_accumulates_same_category():
    summary = summarize(["2024-01-01 Food 10.50\n", "2024-01-02 Food 5.00\n"])
    assert summary.buckets == (Bucket("Food", 1550),)
    assert summary.totals == Totals(1550, 0)
    assert summary.warnings == ()


def test_summarize_inverse_flips_every_amount():
    summary = summarize(["2024-01-01 Rent -800.00\n", "2024-01-02 Pay 10.00\n"], inverse=True)
    by_name = {b.category: b.total_cents for b in summary.buckets}
    assert by_name == {"Rent": 80000, "Pay": -1000}


def test_summarize_collects_warnings_and_skips_bad_lines():
    lines = [
        "2024-01-01 Food 1.00\n",
        "\n",
        "garbage\n",
        "2024-01-02 Food 2.00\n",
        "2024-01-03 Rent\n",
    ]
    summary = summarize(lines)
    assert summary.buckets == (Bucket("Food", 300),)
    assert summary.warnings == (
        "WARNING: Entry ignored. Parsing error in line 3.",
        "WARNING: Entry ignored. Parsing error in line 5.",
    )


def test_summarize_blank_line_only():
    summary = summarize(["\n"])
    assert summary.buckets == ()
    assert summary.warnings == ()

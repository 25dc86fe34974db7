from al_id_inventory.gaps import find_free_ids, sort_records, summarize_categories
from al_id_inventory.models import ExtensionRecord, FreeIdEntry


def rec(category, identifier, path="x.al", name=""):
    return ExtensionRecord(file_path=path, object_name=name, identifier=identifier, category=category)


def test_gap_between_two_ids():
    free = find_free_ids([rec("pageextension", 50251), rec("pageextension", 50254)])
    assert free == [
        FreeIdEntry(identifier=50252, category="pageextension"),
        FreeIdEntry(identifier=50253, category="pageextension"),
    ]


def test_consecutive_ids_have_no_gap():
    assert find_free_ids([rec("A", 1), rec("A", 2), rec("A", 3)]) == []


def test_single_member_category_has_no_gap():
    assert find_free_ids([rec("tableextension", 50100)]) == []
    assert find_free_ids([]) == []


def test_category_boundary_does_not_produce_gap():
    records = [rec("A", 10), rec("A", 11), rec("B", 20), rec("B", 25)]
    free = find_free_ids(records)
    assert [f.identifier for f in free] == [21, 22, 23, 24]
    assert {f.category for f in free} == {"B"}


def test_unsorted_input_is_sorted_first():
    records = [rec("B", 25), rec("A", 11), rec("B", 20), rec("A", 10)]
    assert find_free_ids(records) == find_free_ids(sort_records(records))


def test_duplicate_ids_pass_through_without_gap():
    assert find_free_ids([rec("A", 5), rec("A", 5)]) == []


def test_leading_zero_counts_as_no_predecessor():
    assert find_free_ids([rec("A", 0), rec("A", 3)]) == []
    free = find_free_ids([rec("A", 0), rec("A", 3), rec("A", 5)])
    assert [f.identifier for f in free] == [4]


def test_categories_compare_case_insensitively():
    free = find_free_ids([rec("PageExtension", 1), rec("pageextension", 3)])
    assert free == [FreeIdEntry(identifier=2, category="pageextension")]


def test_sort_records_orders_by_category_then_identifier():
    records = [rec("tableextension", 1), rec("pageextension", 9), rec("PageExtension", 2)]
    ordered = sort_records(records)
    assert [(r.category, r.identifier) for r in ordered] == [
        ("PageExtension", 2),
        ("pageextension", 9),
        ("tableextension", 1),
    ]


def test_summarize_categories():
    records = [rec("B", 25), rec("A", 10), rec("A", 11), rec("B", 20), rec("C", 7)]
    summaries = summarize_categories(iter(records))
    assert [s.to_dict() for s in summaries] == [
        {"category": "A", "first_id": 10, "last_id": 11, "used": 2, "free": 0},
        {"category": "B", "first_id": 20, "last_id": 25, "used": 2, "free": 4},
        {"category": "C", "first_id": 7, "last_id": 7, "used": 1, "free": 0},
    ]

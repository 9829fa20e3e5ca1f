from kubedelta.core.comparator import SetComparator, compare_sets
from kubedelta.core.indexer import index_documents
from kubedelta.core.models import ChangeKind, DocumentKey, ReportStatus


DEPLOYMENT = DocumentKey("Deployment", "app")
SERVICE = DocumentKey("Service", "app")


def deployment(replicas):
    return {"kind": "Deployment", "metadata": {"name": "app"}, "spec": {"replicas": replicas}}


def service():
    return {"kind": "Service", "metadata": {"name": "app"}, "spec": {"ports": [{"port": 80}]}}


def test_missing_in_right_and_full_diff():
    left = index_documents([deployment(3), service()])
    right = index_documents([deployment(5)])

    reports = SetComparator().compare_sets(left, right)

    assert [(r.key, r.status) for r in reports] == [
        (DEPLOYMENT, ReportStatus.COMPARED),
        (SERVICE, ReportStatus.MISSING_IN_RIGHT),
    ]
    entries = reports[0].entries
    assert [(e.path, e.kind, e.before, e.after) for e in entries] == [
        (".spec.replicas", ChangeKind.MODIFIED, "3", "5"),
    ]
    assert reports[1].entries == ()


def test_missing_in_left_is_reported_after_left_keys():
    left = index_documents([deployment(3)])
    right = index_documents([service(), deployment(3)])

    reports = compare_sets(left, right)

    assert [(r.key, r.status) for r in reports] == [
        (DEPLOYMENT, ReportStatus.COMPARED),
        (SERVICE, ReportStatus.MISSING_IN_LEFT),
    ]
    assert not reports[0].has_changes
    assert reports[1].has_changes


def test_right_only_field_is_invisible_inside_document_but_document_level_is_not():
    """
    SPLIT BEHAVIOUR TEST: A field added only on the right is not reported by
    the per-document diff, while a document present only on the right is.
    """
    left = index_documents([{"kind": "ConfigMap", "metadata": {"name": "x"}}])
    right = index_documents([
        {"kind": "ConfigMap", "metadata": {"name": "x"}, "data": {"c": 9}},
        {"kind": "ConfigMap", "metadata": {"name": "y"}},
    ])

    reports = compare_sets(left, right)

    assert reports[0].status is ReportStatus.COMPARED
    assert reports[0].entries == ()
    assert (reports[1].key, reports[1].status) == (DocumentKey("ConfigMap", "y"), ReportStatus.MISSING_IN_LEFT)


def test_symmetric_compare_reports_right_only_field():
    left = index_documents([{"kind": "ConfigMap", "metadata": {"name": "x"}}])
    right = index_documents([{"kind": "ConfigMap", "metadata": {"name": "x"}, "data": {"c": 9}}])

    reports = compare_sets(left, right, symmetric=True)

    assert [(e.path, e.kind, e.after) for e in reports[0].entries] == [(".data", ChangeKind.ADDED, "c: 9")]


def test_every_key_visited_once():
    left = index_documents([deployment(1), service()])
    right = index_documents([service(), {"kind": "Secret", "metadata": {"name": "s"}}])

    keys = [r.key for r in compare_sets(left, right)]

    assert sorted(map(str, keys)) == ["Deployment/app", "Secret/s", "Service/app"]
    assert len(keys) == len(set(keys))


def test_empty_sets():
    assert compare_sets({}, {}) == []

from nsctl.config import ScanOptions
from nsctl.models import ConnectionTarget
from nsctl.modules.scan import scan
from nsctl.registry import Registry, load_registry, save_registry


def test_scan_all_projects(provider):
    registry = Registry()
    report = scan(registry, provider)

    assert report.ok
    assert (report.projects, report.clusters, report.namespaces) == (2, 3, 7)
    assert [e.name for e in registry] == ["default", "payments", "billing", "search"]

    _, entry = registry.find("payments")
    assert entry.targets == [
        ConnectionTarget("p1", "eastCluster", "us-east1"),
        ConnectionTarget("p1", "westCluster", "us-west1"),
    ]
    _, entry = registry.find("default")
    assert len(entry.targets) == 3


def test_scan_single_project_skips_listing(provider):
    registry = Registry()
    report = scan(registry, provider, ScanOptions(project="p2"))

    assert ("list_projects", "*") not in provider.calls
    assert report.projects == 1
    assert [e.name for e in registry] == ["default", "search"]


def test_scan_continues_after_cluster_listing_failure(make_provider):
    provider = make_provider(fail={("list_clusters", "p2")})
    registry = Registry()
    report = scan(registry, provider)

    assert not report.ok
    assert report.failures[0].stage == "project"
    assert report.failures[0].subject == "p2"
    assert "payments" in registry
    assert "billing" in registry
    assert "search" not in registry


def test_scan_continues_after_project_activation_failure(make_provider):
    provider = make_provider(fail={("activate_project", "p1")})
    registry = Registry()
    report = scan(registry, provider)

    assert len(report.failures) == 1
    assert ("activate_project", "p2") in provider.calls
    assert [e.name for e in registry] == ["default", "search"]


def test_scan_skips_cluster_with_failing_namespace_listing(make_provider):
    provider = make_provider(fail={("list_namespaces", "eastCluster")})
    registry = Registry()
    report = scan(registry, provider)

    assert report.clusters == 2
    assert report.failures[0].subject == "p1/eastCluster"
    _, entry = registry.find("payments")
    assert [t.cluster for t in entry.targets] == ["westCluster"]


def test_scan_without_project_list_records_nothing(make_provider):
    provider = make_provider(fail={("list_projects", "*")})
    registry = Registry()
    report = scan(registry, provider)

    assert len(registry) == 0
    assert report.failures[0].stage == "list projects"


def test_each_call_is_attempted_once(make_provider):
    provider = make_provider(fail={("activate_cluster", "euCluster")})
    scan(Registry(), provider)
    assert provider.calls.count(("activate_cluster", "euCluster")) == 1


def test_repeated_scans_accumulate(provider, tmp_path):
    path = tmp_path / "namespaces.yaml"
    registry = Registry()
    scan(registry, provider, ScanOptions(project="p1"))
    save_registry(registry, path)

    registry = load_registry(path)
    scan(registry, provider, ScanOptions(project="p1"))
    save_registry(registry, path)

    _, entry = load_registry(path).find("payments")
    assert len(entry.targets) == 4
    assert {t.cluster for t in entry.targets} == {"eastCluster", "westCluster"}


def test_scan_result_does_not_depend_on_order(make_provider):
    reordered = {
        "p2": {"euCluster": ("europe-west1", ["search", "default"])},
        "p1": {
            "westCluster": ("us-west1", ["billing", "payments", "default"]),
            "eastCluster": ("us-east1", ["payments", "default"]),
        },
    }
    first, second = Registry(), Registry()
    scan(first, make_provider())
    scan(second, make_provider(layout=reordered))

    assert {e.name for e in first} == {e.name for e in second}
    for entry in first:
        _, other = second.find(entry.name)
        assert sorted(entry.targets, key=repr) == sorted(other.targets, key=repr)

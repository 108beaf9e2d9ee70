from assettrack.services.aggregates import (
    EmployeeAggregate,
    aggregate_by_category,
    recent_assignments,
    status_counts,
)


def test_category_groups_follow_first_occurrence(make_device):
    devices = [make_device(type="computer"), make_device(type="Laptop"), make_device(type="COMPUTER")]
    groups = aggregate_by_category(devices)
    assert list(groups) == ["Computer", "Laptop"]
    assert groups["Computer"].count == 2
    assert groups["Laptop"].count == 1
    assert groups["Computer"].icon == "laptop"


def test_category_unknown_type_gets_default_metadata(make_device):
    groups = aggregate_by_category([make_device(type="projector"), make_device(type="")])
    assert list(groups) == ["Projector", "Other"]
    assert groups["Projector"].color == "text-gray-700 bg-gray-100"


def test_every_device_lands_in_one_category(make_device):
    devices = [make_device(type=t) for t in ["router", "Router", "mordem", "modem", "x", ""]]
    groups = aggregate_by_category(devices)
    assert sum(g.count for g in groups.values()) == len(devices)


def test_employee_counts(make_device):
    devices = [
        make_device(assigned_to="Alice"),
        make_device(assigned_to="Alice"),
        make_device(assigned_to=""),
        make_device(assigned_to="   "),
        make_device(assigned_to="Bob"),
    ]
    agg = EmployeeAggregate.from_devices(devices)
    assert agg.total_employees == 2
    assert agg.employees_with_multiple_devices == 1
    assert "" not in agg.groups and "   " not in agg.groups
    assert sum(len(v) for v in agg.groups.values()) == 3


def test_employee_names_are_case_sensitive(make_device):
    agg = EmployeeAggregate.from_devices([make_device(assigned_to="alice"), make_device(assigned_to="Alice")])
    assert agg.total_employees == 2
    assert agg.employee_list() == ["Alice", "alice"]


def test_top_multi_device_employees_keeps_first_seen_order(make_device):
    devices = [
        make_device(assigned_to="Carol"),
        make_device(assigned_to="Dave"),
        make_device(assigned_to="Dave"),
        make_device(assigned_to="Carol"),
        make_device(assigned_to="Erin"),
        make_device(assigned_to="Erin"),
        make_device(assigned_to="Erin"),
    ]
    agg = EmployeeAggregate.from_devices(devices)
    top = agg.top_multi_device_employees(2)
    assert [name for name, _ in top] == ["Carol", "Dave"]
    assert agg.top_multi_device_employees(0) == []


def test_assignment_breakdown(make_device):
    devices = [
        make_device(assigned_to="Ann", status="Active"),
        make_device(assigned_to="Ann", status="Maintenance"),
        make_device(assigned_to="Ann", status="Available"),
    ]
    (row,) = EmployeeAggregate.from_devices(devices).assignments()
    assert row["employee"] == "Ann"
    assert (row["device_count"], row["active_devices"], row["available_devices"], row["maintenance_devices"]) == (3, 1, 1, 1)


def test_status_counts_and_recent(make_device):
    devices = [
        make_device(status="Active", date_assigned="2024-01-10"),
        make_device(status="Maintenance", date_assigned="2024-03-01"),
        make_device(status="Active"),
    ]
    assert status_counts(devices) == {"Active": 2, "Available": 0, "Maintenance": 1, "Inactive": 0}
    recent = recent_assignments(devices, 5)
    assert [d.date_assigned for d in recent] == ["2024-03-01", "2024-01-10"]

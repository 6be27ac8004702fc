from __future__ import annotations

import pytest

from goc_office_map.data import RowOrigin, assign_occupancy, filter_mappable, join_registry

from conftest import CSC, PSPC, make_tables


def occupancy_for(config, **tables):
    return assign_occupancy(filter_mappable(join_registry(make_tables(**tables)), config), config)


def one_structure(area, tenants=(), uses=("Office",)):
    return dict(
        properties=[{"property_id": "P1"}],
        structures=[{"structure_id": "S1", "property_id": "P1", "structure_floor_area": area}],
        uses=[{"structure_id": "S1", "use_type": u} for u in uses],
        tenants=[{"structure_id": "S1", "tenant_name": n, "tenant_floor_area": a} for n, a in tenants],
    )


def test_structure_without_tenants_goes_to_custodian(config):
    occ = occupancy_for(config, **one_structure(1000.0))
    assert len(occ) == 1
    row = occ.iloc[0]
    assert row["tenant_name"] == PSPC
    assert row["floor_area"] == 1000.0
    assert row["row_origin"] == RowOrigin.SYNTHESIZED_CUSTODIAN.value


def test_custodian_receives_residual(config):
    occ = occupancy_for(config, **one_structure(1000.0, [("Dept X", 600.0), ("Dept Y", 300.0)]))
    assert occ["tenant_name"].tolist() == ["Dept X", "Dept Y", PSPC]
    assert occ["floor_area"].tolist() == pytest.approx([600.0, 300.0, 100.0])
    assert occ["row_origin"].tolist() == ["original", "original", "synthesized_custodian"]


@pytest.mark.parametrize("area", [905.0, 909.99, 850.0])
def test_small_or_negative_residual_is_dropped(config, area):
    occ = occupancy_for(config, **one_structure(area, [("Dept X", 600.0), ("Dept Y", 300.0)]))
    assert PSPC not in occ["tenant_name"].tolist()
    assert len(occ) == 2


def test_residual_at_threshold_is_kept(config):
    occ = occupancy_for(config, **one_structure(910.0, [("Dept X", 600.0), ("Dept Y", 300.0)]))
    assert occ.loc[occ["tenant_name"] == PSPC, "floor_area"].tolist() == pytest.approx([10.0])


def test_small_and_unsized_tenants_are_dropped(config):
    occ = occupancy_for(config, **one_structure(1000.0, [("Dept X", 5.0), ("Dept Y", None), ("Dept Z", 400.0)]))
    assert occ["tenant_name"].tolist() == ["Dept Z", PSPC]
    # missing tenant area counts as zero towards the residual
    assert occ["floor_area"].tolist() == pytest.approx([400.0, 595.0])


def test_unknown_structure_area_drops_residual(config):
    occ = occupancy_for(config, **one_structure(None, [("Dept X", 600.0)]))
    assert occ["tenant_name"].tolist() == ["Dept X"]


def test_tenant_counted_once_across_use_records(config):
    occ = occupancy_for(
        config,
        **one_structure(1000.0, [("Dept X", 600.0)], uses=("Office", "Law Enforcement and Corrections")),
    )
    assert occ["tenant_name"].tolist() == ["Dept X", PSPC]
    assert occ["floor_area"].tolist() == pytest.approx([600.0, 400.0])


def test_correctional_property_collapses_to_one_row(config):
    occ = occupancy_for(
        config,
        properties=[{"property_id": "P9", "custodian": CSC}],
        structures=[
            {"structure_id": "S91", "property_id": "P9", "structure_floor_area": 100.0, "structure_name": "Gatehouse"},
            {"structure_id": "S92", "property_id": "P9", "structure_floor_area": 5000.0},
            {"structure_id": "S93", "property_id": "P9", "structure_floor_area": 300.0},
        ],
        uses=[{"structure_id": s, "use_type": "Law Enforcement and Corrections"} for s in ("S91", "S92", "S93")],
        tenants=[{"structure_id": "S92", "tenant_name": "Dept X", "tenant_floor_area": 50.0}],
    )
    assert len(occ) == 1
    row = occ.iloc[0]
    assert row["structure_id"] == "S91"
    assert row["structure_name"] == "Gatehouse"
    assert row["tenant_name"] == CSC
    assert row["floor_area"] == 5000.0
    assert row["row_origin"] == RowOrigin.PROPERTY_AGGREGATE.value


def test_branches_partition_by_custodian(config, scenario_tables):
    occ = assign_occupancy(filter_mappable(join_registry(scenario_tables), config), config)
    by_structure = occ.groupby("structure_id")["tenant_name"].apply(list).to_dict()
    assert by_structure == {
        "S1": ["Dept X", "Dept Y", PSPC],
        "S2": [PSPC],
        "S91": [CSC],
    }
    assert occ.loc[occ["structure_id"] == "S2", "floor_area"].item() == 2500.0
    assert occ.loc[occ["structure_id"] == "S91", "floor_area"].item() == 4200.0


def test_threshold_is_configurable(config):
    strict = config.with_options({"min_floor_area": 150.0})
    occ = occupancy_for(strict, **one_structure(1000.0, [("Dept X", 600.0), ("Dept Y", 300.0)]))
    assert occ["tenant_name"].tolist() == ["Dept X", "Dept Y"]


def test_custodian_listed_as_tenant_absorbs_residual(config):
    occ = occupancy_for(config, **one_structure(1000.0, [(PSPC, 600.0)]))
    assert occ["tenant_name"].tolist() == [PSPC]
    assert occ["floor_area"].tolist() == pytest.approx([1000.0])
    assert occ["row_origin"].tolist() == ["original"]


def test_custodian_tenant_row_keeps_order_with_other_tenants(config):
    occ = occupancy_for(config, **one_structure(1000.0, [("Dept X", 500.0), (PSPC, 300.0)]))
    assert occ["tenant_name"].tolist() == ["Dept X", PSPC]
    assert occ["floor_area"].tolist() == pytest.approx([500.0, 500.0])


def test_custodian_tenant_row_ignores_negative_residual(config):
    occ = occupancy_for(config, **one_structure(800.0, [("Dept X", 600.0), (PSPC, 300.0)]))
    assert occ["floor_area"].tolist() == pytest.approx([600.0, 300.0])


def test_threshold_applies_to_combined_custodian_area(config):
    # 4 sq. m. listed plus a 6 sq. m. residual reaches the minimum together
    occ = occupancy_for(config, **one_structure(1000.0, [("Dept X", 990.0), (PSPC, 4.0)]))
    assert occ["tenant_name"].tolist() == ["Dept X", PSPC]
    assert occ["floor_area"].tolist() == pytest.approx([990.0, 10.0])

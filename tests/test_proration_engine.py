"""
Integration Tests for ProrationEngine

Inputs → annual tax breakdown → seller / buyer payments.
"""

import json

import pytest

from config.params import CertificateTaxInputs, ValuationTaxInputs
from core.engine.proration_engine import ProrationEngine, ProrationReport


@pytest.fixture
def engine():
    return ProrationEngine()


@pytest.fixture
def valuation_inputs():
    return ValuationTaxInputs.from_form(
        building_value="12,345,678",
        land_property_tax_base="600,000,000",
        land_city_planning_tax_base="1,200,000,000",
        ownership_numerator="10",
        ownership_denominator="10000",
    )


@pytest.fixture
def certificate_inputs():
    return CertificateTaxInputs.from_form("168,000", "36,000", "84,000", "36,000")


class TestValuationReport:

    def test_report(self, engine, valuation_inputs):
        report = engine.calculate(valuation_inputs, "2024-04-01")
        assert isinstance(report, ProrationReport)
        assert report.method == "valuation"
        assert report.annual_tax == 220_000
        assert report.seller_payment == 54_699
        assert report.buyer_payment == 165_301

    def test_to_json(self, engine, valuation_inputs):
        data = json.loads(engine.calculate(valuation_inputs, "2024-04-01").to_json())
        assert data["method"] == "valuation"
        assert data["closing_date"] == "2024-04-01"
        assert data["breakdown"]["building"] == 12_345_000
        assert data["breakdown"]["land_city_planning_tax"] == 1_800
        assert data["breakdown"]["final_tax"] == 220_000
        assert data["proration"]["partition"]["seller_days"] == 91
        assert data["seller_payment"] == 54_699
        assert data["buyer_payment"] == 165_301

    def test_recomputed_on_every_call(self, engine, valuation_inputs):
        first = engine.calculate(valuation_inputs, "2024-04-01")
        second = engine.calculate(valuation_inputs, "2024-10-01")
        assert first.annual_tax == second.annual_tax
        assert first.seller_payment < second.seller_payment


class TestCertificateReport:

    def test_report(self, engine, certificate_inputs):
        report = engine.calculate(certificate_inputs, "2024-04-01")
        assert report.method == "certificate"
        assert report.breakdown.building_total == 204_000
        assert report.breakdown.land_total == 120_000
        assert report.annual_tax == 324_000
        assert report.seller_payment == 80_557
        assert report.buyer_payment == 243_443

    def test_garbage_input_still_computes(self, engine):
        inputs = CertificateTaxInputs.from_form("abc", "", "-", "1,2,3")
        report = engine.calculate(inputs, "2023-05-05")
        assert report.annual_tax == 123
        assert report.seller_payment + report.buyer_payment == pytest.approx(123, abs=1)


class TestEngineErrors:

    def test_rejects_unknown_inputs(self, engine):
        with pytest.raises(TypeError):
            engine.calculate({"building_value": 1}, "2024-04-01")

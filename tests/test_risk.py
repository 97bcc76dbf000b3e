"""Tests for the risk helpers."""

import numpy as np
import pytest
from bsvol import MarketInputs, CALL, PUT, bs_greeks, bs_price
from bsvol.risk import numerical_greeks, scenario_grid

INP = MarketInputs(spot=100, strike=100, rate=0.05, time=1.0, volatility=0.2)


class TestNumericalGreeks:
    def test_vs_analytical_bs(self):
        ng = numerical_greeks(INP)
        ag = bs_greeks(INP)
        assert abs(ng.delta_call - ag.delta_call) < 0.005
        assert abs(ng.delta_put - ag.delta_put) < 0.005
        assert abs(ng.gamma - ag.gamma) < 0.002
        assert abs(ng.vega - ag.vega) < 0.5
        assert abs(ng.theta_call - ag.theta_call) < 0.1
        assert abs(ng.theta_put - ag.theta_put) < 0.1
        assert abs(ng.rho_call - ag.rho_call) < 0.5
        assert abs(ng.rho_put - ag.rho_put) < 0.5

    def test_small_bump_tight(self):
        ng = numerical_greeks(INP, bump_pct=1e-4)
        ag = bs_greeks(INP)
        for key, value in ag.as_dict().items():
            assert getattr(ng, key) == pytest.approx(value, rel=1e-3, abs=1e-6), key

    def test_put_delta_negative(self):
        assert numerical_greeks(INP).delta_put < 0

    def test_vega_near_zero_volatility(self):
        # The down bump is floored at 1e-6; the quotient uses the real spread.
        tiny = MarketInputs(spot=100, strike=100, rate=0.0, time=1.0, volatility=5e-5)
        ng = numerical_greeks(tiny)
        assert ng.vega == pytest.approx(bs_greeks(tiny).vega, rel=1e-3)


class TestScenarioGrid:
    def test_output_shape(self):
        spots = np.array([90.0, 100.0, 110.0])
        vols = np.array([0.15, 0.20, 0.25])
        result = scenario_grid(INP, CALL, spots, vols)
        assert result["prices"].shape == (3, 3)

    def test_centre_matches_price(self):
        result = scenario_grid(INP, PUT, [100.0], [0.2])
        assert result["prices"][0, 0] == pytest.approx(bs_price(INP, PUT))

    def test_call_monotone_in_spot(self):
        spots = np.linspace(80, 120, 5)
        vols = np.array([0.2])
        result = scenario_grid(INP, "call", spots, vols)
        prices = result["prices"][:, 0]
        assert np.all(np.diff(prices) > 0)

    def test_monotone_in_vol(self):
        result = scenario_grid(INP, PUT, [100.0], np.linspace(0.1, 0.5, 5))
        assert np.all(np.diff(result["prices"][0, :]) > 0)


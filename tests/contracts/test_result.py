"""Tests for ServiceResult, ServiceError and the Algorithm label."""

import pytest
from pydantic import BaseModel, ValidationError

from traveler.contracts import result as codes
from traveler.contracts.enums import Algorithm
from traveler.contracts.result import ServiceResult
from traveler.services.errors import ComputationInProgress, ResolutionError


class TestServiceResult:
    def test_ok(self):
        outcome = ServiceResult.ok("view", duration_ms=12.5)
        assert outcome.success
        assert outcome.data == "view"
        assert outcome.error is None

    def test_fail_without_details(self):
        outcome = ServiceResult.fail(codes.INVALID_INPUT, "Please enter both source and destination")
        assert not outcome.success
        assert outcome.data is None
        assert outcome.error.details is None

    def test_from_trip_error(self):
        outcome = ServiceResult.from_error(ResolutionError("Atlantis").as_service_error())
        assert outcome.error.code == codes.RESOLUTION_ERROR
        assert outcome.error.message == "Geocoding failed for Atlantis"
        assert outcome.error.details == {"place": "Atlantis"}
        assert not outcome.error.retryable

    def test_only_busy_session_is_retryable(self):
        error = ComputationInProgress("abc").as_service_error()
        assert error.code == codes.COMPUTATION_IN_PROGRESS
        assert error.details is None
        assert error.retryable


class _Choice(BaseModel):
    algorithm: Algorithm


class TestAlgorithmLabel:
    @pytest.mark.parametrize("text", ["a-star", "astar", "A*", "a_star", "AStar"])
    def test_astar_spellings(self, text):
        assert Algorithm(text) is Algorithm.ASTAR

    def test_case_insensitive(self):
        assert Algorithm("Dijkstra") is Algorithm.DIJKSTRA

    def test_variant_accepted_by_models(self):
        assert _Choice(algorithm="astar").algorithm is Algorithm.ASTAR

    def test_unknown_label_rejected(self):
        with pytest.raises(ValueError):
            Algorithm("greedy")
        with pytest.raises(ValidationError):
            _Choice(algorithm="greedy")

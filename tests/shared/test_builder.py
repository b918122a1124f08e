"""Tests for the FluentBuilder base."""

import pytest
from shared.builder import FluentBuilder
from shared.errors import DomainException


class DoughBuilder(FluentBuilder):
    def __init__(self, flour):
        super().__init__()
        if flour <= 0:
            self.add_domain_error("Flour must be positive")
        self._flour = flour

    def water(self, amount):
        if amount > self._flour:
            self.add_domain_error("Too much water")
        self._water = amount
        return self

    def _construct(self):
        return {"flour": self._flour, "water": self._water}


class TestFluentBuilder:
    def test_build_constructs_when_valid(self):
        assert DoughBuilder(500).water(300).build() == {"flour": 500, "water": 300}

    def test_build_raises_all_errors(self):
        with pytest.raises(DomainException) as exc:
            DoughBuilder(0).water(10).build()

        assert exc.value.messages == ["Flour must be positive", "Too much water"]

    def test_domain_errors_is_a_copy(self):
        builder = DoughBuilder(0)
        builder.domain_errors.append("tampered")

        assert builder.domain_errors == ["Flour must be positive"]

    def test_construct_must_be_implemented(self):
        with pytest.raises(NotImplementedError):
            FluentBuilder().build()

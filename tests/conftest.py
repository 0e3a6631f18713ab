"""Shared test fixtures."""

import pytest

from pywxunits import FixedOffsetProvider, TimeCodec, UnitConverter


@pytest.fixture
def converter():
    return UnitConverter()


@pytest.fixture
def utc_codec():
    return TimeCodec(FixedOffsetProvider(0))


@pytest.fixture
def plus_one_codec():
    return TimeCodec(FixedOffsetProvider(3600))


@pytest.fixture
def minus_five_codec():
    return TimeCodec(FixedOffsetProvider(-5 * 3600))

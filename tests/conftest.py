import random

import pytest

from noir_helpers.common.field import FieldElement
from noir_helpers.common.params import FieldParams


@pytest.fixture
def rng():
    """Deterministic random source."""
    return random.Random(1234)


@pytest.fixture
def tiny_field():
    """FieldElement class over Z_97, small enough to check by hand."""
    return FieldElement.for_params(FieldParams(name="tiny", modulus=97))


@pytest.fixture
def composite_field():
    """FieldElement class over Z_15, where 3, 5, 6, ... have no inverse."""
    return FieldElement.for_params(FieldParams(name="composite", modulus=15))

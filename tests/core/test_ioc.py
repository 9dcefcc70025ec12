from typing import List

import pytest

from pizzeria.core.ioc import ProviderType, component, get_component_key
from pizzeria.core.context import context
from pizzeria.core.mediator import Mediator


class Unregistered:
    pass


def test_component_key_uses_module_and_name():
    assert get_component_key(Unregistered) == "tests_core_test_ioc_Unregistered"


def test_list_key_is_prefixed():
    assert get_component_key(List[Unregistered]) == "List_tests_core_test_ioc_Unregistered"


def test_list_key_requires_argument():
    with pytest.raises(ValueError):
        get_component_key(List)


def test_duplicated_component_is_rejected():
    with pytest.raises(ValueError, match="Duplicated"):
        component(Mediator)


def test_value_is_not_valid_for_singletons():
    with pytest.raises(ValueError, match="value"):
        component(Unregistered, value=Unregistered())
    assert get_component_key(Unregistered) not in context.component_registry


def test_resource_requires_factory():
    with pytest.raises(ValueError, match="factory"):
        component(Unregistered, provider_type=ProviderType.RESOURCE)
    assert get_component_key(Unregistered) not in context.component_registry


def test_list_does_not_take_a_value():
    with pytest.raises(ValueError):
        component(List[Unregistered], provider_type=ProviderType.LIST, value=[])

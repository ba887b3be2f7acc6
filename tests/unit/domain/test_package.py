"""Tests for package exports."""

from repokit.domain.models import __all__ as models_all
from repokit.domain.models import ApiResponse, Page, PageRequest, Sort
from repokit.domain.repositories import __all__ as repositories_all
from repokit.domain.repositories import (
    CrudRepository,
    ListRepository,
    PagingAndSortingRepository,
)


def test_domain_models_exports_six_names():
    assert len(models_all) == 6


def test_value_objects_importable_from_package():
    assert {Sort.__name__, PageRequest.__name__, Page.__name__, ApiResponse.__name__} == {
        "Sort",
        "PageRequest",
        "Page",
        "ApiResponse",
    }


def test_repository_tiers_exported():
    assert set(repositories_all) == {
        "CrudRepository",
        "PagingAndSortingRepository",
        "ListRepository",
    }


def test_repository_tiers_are_layered():
    assert issubclass(PagingAndSortingRepository, CrudRepository)
    assert issubclass(ListRepository, PagingAndSortingRepository)

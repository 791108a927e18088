import pytest
from pydantic import ValidationError

from backoffice.schemas import ListQuery, Page


@pytest.mark.parametrize("total,limit,page,total_pages,is_last_page", [
    (5, 2, 1, 3, False),
    (5, 2, 3, 3, True),
    (10, 5, 2, 2, True),
    (11, 5, 2, 3, False),
    (0, 10, 1, 0, True),
    (3, 10, 4, 1, True),
])
def test_page_metadata(total, limit, page, total_pages, is_last_page):
    result = Page.build([], total, ListQuery(page=page, limit=limit))

    assert result.total == total
    assert result.page == page
    assert result.total_pages == total_pages
    assert result.is_last_page is is_last_page


def test_page_serializes_camel_case():
    result = Page.build(["a"], 1, ListQuery(page=1, limit=1))

    assert result.model_dump(by_alias=True) == {
        "data": ["a"],
        "total": 1,
        "page": 1,
        "totalPages": 1,
        "isLastPage": True,
    }


def test_list_query_offset():
    assert ListQuery(page=3, limit=20).offset == 40


@pytest.mark.parametrize("kwargs", [{"page": 0}, {"limit": 0}, {"limit": -5}])
def test_list_query_rejects_non_positive_values(kwargs):
    with pytest.raises(ValidationError):
        ListQuery(**kwargs)

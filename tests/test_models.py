"""Tests for the request descriptor and the argument validator."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pact.core.domain.models import ApiRequest, HttpMethod, SortDirection
from pact.core.errors import InvalidArgumentError, PactError
from pact.core.validation import Validator


class TestApiRequest:
    def test_path_renders_params_in_order(self) -> None:
        req = ApiRequest(method=HttpMethod.PUT, endpoint="companies/{}/channels/{}", path_params=[4, 9])
        assert req.path() == "companies/4/channels/9"

    def test_path_params_are_quoted(self) -> None:
        req = ApiRequest(method=HttpMethod.GET, endpoint="companies/{}/channels", path_params=["a/b c"])
        assert req.path() == "companies/a%2Fb%20c/channels"

    def test_path_param_count_mismatch(self) -> None:
        req = ApiRequest(method=HttpMethod.GET, endpoint="companies/{}/channels/{}", path_params=[1])
        with pytest.raises(InvalidArgumentError, match="expects 2 path parameters, got 1"):
            req.path()

    def test_clean_drops_none_and_unwraps_enums(self) -> None:
        req = ApiRequest(
            method=HttpMethod.GET,
            endpoint="companies/{}/channels",
            path_params=[1],
            query={"from": None, "per": 10, "sort_direction": SortDirection.DESC},
            body={"flag": False, "skip": None},
        )
        assert req.clean_query() == {"per": 10, "sort_direction": "desc"}
        assert req.clean_body() == {"flag": False}

    def test_frozen(self) -> None:
        req = ApiRequest(method=HttpMethod.GET, endpoint="x")
        with pytest.raises(ValidationError):
            req.endpoint = "y"  # type: ignore[misc]


class TestValidator:
    def test_check(self) -> None:
        Validator().check(False, "never")
        with pytest.raises(InvalidArgumentError, match="boom") as exc_info:
            Validator().check(True, "boom")
        assert exc_info.value.message == "boom"

    def test_invalid_argument_is_value_error(self) -> None:
        assert issubclass(InvalidArgumentError, ValueError)
        assert issubclass(InvalidArgumentError, PactError)

    def test_between_accepts_none(self) -> None:
        Validator().between(None, 1, 100)

    def test_between_names_parameter(self) -> None:
        with pytest.raises(InvalidArgumentError, match="per must be between 1 and 100, got 0"):
            Validator().between(0, 1, 100, name="per")

    def test_between_rejects_float(self) -> None:
        with pytest.raises(InvalidArgumentError, match="per must be an integer, got 50.5"):
            Validator().between(50.5, 1, 100, name="per")

    @pytest.mark.parametrize("value", [None, "asc", "desc", SortDirection.DESC])
    def test_sort_accepts(self, value) -> None:
        Validator().sort(value)

    def test_not_empty(self) -> None:
        Validator().not_empty("x", "empty")
        with pytest.raises(InvalidArgumentError, match="empty"):
            Validator().not_empty("", "empty")

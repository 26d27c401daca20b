"""Tests for auto_bump.models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from auto_bump.models import (
    AutoBumpProps,
    BumpHead,
    BumpRequest,
    PullRequestBase,
    PullRequestSpec,
    RepositoryIdentity,
)


class TestRepositoryIdentity:
    def test_slug(self) -> None:
        assert RepositoryIdentity(owner="acme", repo="widgets").slug == "acme/widgets"

    def test_parse(self) -> None:
        repo = RepositoryIdentity.parse("acme/widgets")
        assert repo.owner == "acme"
        assert repo.repo == "widgets"

    def test_parse_strips_whitespace(self) -> None:
        assert RepositoryIdentity.parse(" acme/widgets\n").slug == "acme/widgets"

    @pytest.mark.parametrize("slug", ["acme", "acme/", "/widgets", "a/b/c", ""])
    def test_parse_rejects_malformed(self, slug: str) -> None:
        with pytest.raises(ValueError):
            RepositoryIdentity.parse(slug)


class TestBumpRequest:
    def test_all_fields_optional(self) -> None:
        request = BumpRequest()
        assert request.bump_command is None
        assert request.version_command is None
        assert request.title is None
        assert request.body is None
        assert request.head is None
        assert request.exports == {}
        assert request.push_only is False

    @pytest.mark.parametrize("field", ["commands", "condition"])
    def test_rejects_configurator_owned_fields(self, field: str) -> None:
        with pytest.raises(ValidationError):
            BumpRequest.model_validate({field: "echo hi"})

    def test_rejects_engine_shaped_head(self) -> None:
        with pytest.raises(ValidationError):
            BumpRequest.model_validate({"head": {"name": "x", "source": "abc"}})

    def test_accepts_narrow_head(self) -> None:
        request = BumpRequest(head=BumpHead(name="release/$VERSION", sha="abc123"))
        assert request.head is not None
        assert request.head.sha == "abc123"


class TestAutoBumpProps:
    def test_requires_repo(self) -> None:
        with pytest.raises(ValidationError):
            AutoBumpProps()

    def test_is_a_bump_request(self) -> None:
        props = AutoBumpProps(repo=RepositoryIdentity(owner="o", repo="r"), title="t")
        assert isinstance(props, BumpRequest)
        assert props.title == "t"


class TestFieldSync:
    def test_request_mirrors_spec_passthrough_fields(self) -> None:
        """BumpRequest exposes every spec field except the configurator-owned ones."""
        owned = {"commands", "condition", "head", "repo"}
        bump_only = {"bump_command", "version_command", "head"}

        spec_fields = set(PullRequestSpec.model_fields)
        request_fields = set(BumpRequest.model_fields)

        assert request_fields - bump_only == spec_fields - owned


class TestPullRequestBase:
    def test_defaults_to_master(self) -> None:
        assert PullRequestBase().name == "master"

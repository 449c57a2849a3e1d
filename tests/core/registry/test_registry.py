"""
tests/core/registry/test_registry.py - DAO/Renderer 레지스트리 테스트
"""

from unittest.mock import MagicMock

import pytest

from core.exceptions import NotRegisteredError, RegistryClosedError
from core.registry import Catalog, Entry, Registry, ServiceCategory, get_registry, reset_registry


def _dao_factory(ctx):
    dao = MagicMock()
    dao.ctx = ctx
    return dao


def _renderer_factory():
    return MagicMock(name="renderer")


ENTRY = Entry(_dao_factory, _renderer_factory)


@pytest.fixture
def catalog():
    return Catalog(
        aliases={"cfn": "cloudformation", "logs": "cloudwatch/log-groups"},
        display_names={"ec2": "EC2", "cloudformation": "CloudFormation"},
        categories=(
            ServiceCategory("Compute", ("ec2", "lambda")),
            ServiceCategory("DevOps", ("cloudformation",)),
        ),
        default_resources={"cloudwatch": "log-groups"},
        sub_resources=frozenset({"cloudformation/resources"}),
    )


@pytest.fixture
def registry(catalog):
    reg = Registry(catalog)
    reg.register_custom("ec2", "instances", ENTRY)
    reg.register_custom("cloudformation", "stacks", ENTRY)
    reg.register_custom("cloudformation", "resources", ENTRY)
    reg.register_custom("cloudwatch", "log-streams", ENTRY)
    reg.register_custom("cloudwatch", "log-groups", ENTRY)
    reg.register_custom("sqs", "queues", ENTRY)
    return reg


class TestRegistration:
    """등록/조회 테스트"""

    def test_custom_overrides_generated(self):
        """custom 엔트리가 generated보다 우선"""
        reg = Registry()
        generated = Entry(_dao_factory, None)
        reg.register_generated("ec2", "instances", generated)
        assert reg.get("ec2", "instances") is generated

        reg.register_custom("ec2", "instances", ENTRY)
        assert reg.get("ec2", "instances") is ENTRY

    def test_get_missing(self):
        assert Registry().get("ec2", "instances") is None

    def test_get_dao_passes_context(self, registry):
        ctx = object()
        dao = registry.get_dao(ctx, "ec2", "instances")
        assert dao.ctx is ctx

    def test_get_dao_not_registered(self, registry):
        with pytest.raises(NotRegisteredError):
            registry.get_dao(None, "ec2", "volumes")

    def test_get_renderer_without_factory(self):
        reg = Registry()
        reg.register_generated("ec2", "instances", Entry(_dao_factory, None))
        with pytest.raises(NotRegisteredError):
            reg.get_renderer("ec2", "instances")

    def test_has_resource(self, registry):
        assert registry.has_resource("sqs", "queues")
        assert not registry.has_resource("sqs", "topics")

    def test_closed_rejects_registration(self, registry):
        """close 이후 등록은 RegistryClosedError"""
        registry.close()
        assert registry.closed

        with pytest.raises(RegistryClosedError):
            registry.register_custom("s3", "buckets", ENTRY)
        with pytest.raises(RegistryClosedError):
            registry.register_alias("x", "s3")
        with pytest.raises(RegistryClosedError):
            registry.register_sub_resource("s3", "objects")
        with pytest.raises(RegistryClosedError):
            registry.set_display_name("s3", "S3")

    def test_closed_allows_reads_and_user_default(self, registry):
        """조회와 사용자 기본 리소스 지정은 close 이후에도 가능"""
        registry.close()
        assert registry.get_renderer("ec2", "instances") is not None
        registry.set_default_resource("cloudwatch", "log-streams")
        assert registry.default_resource("cloudwatch") == "log-streams"


class TestListing:
    """목록 조회 테스트"""

    def test_list_services(self, registry):
        assert registry.list_services() == ["cloudformation", "cloudwatch", "ec2", "sqs"]

    def test_list_services_by_category(self, registry):
        """카테고리 순서 유지, 미분류는 Other"""
        categories = registry.list_services_by_category()
        assert [(c.name, c.services) for c in categories] == [
            ("Compute", ("ec2",)),
            ("DevOps", ("cloudformation",)),
            ("Other", ("cloudwatch", "sqs")),
        ]

    def test_list_resources_excludes_sub_resources(self, registry):
        assert registry.list_resources("cloudformation") == ["stacks"]
        assert registry.is_sub_resource("cloudformation", "resources")
        assert not registry.is_sub_resource("cloudformation", "stacks")

    def test_register_sub_resource(self, registry):
        registry.register_sub_resource("cloudwatch", "log-streams")
        assert registry.list_resources("cloudwatch") == ["log-groups"]

    def test_list_resources_unknown(self, registry):
        assert registry.list_resources("nope") == []


class TestDefaults:
    """기본 리소스/표시 이름 테스트"""

    def test_catalog_default(self, registry):
        assert registry.default_resource("cloudwatch") == "log-groups"

    def test_first_resource_fallback(self, registry):
        assert registry.default_resource("ec2") == "instances"

    def test_user_default_wins(self, registry):
        registry.set_default_resource("cloudformation", "resources")
        assert registry.default_resource("cloudformation") == "resources"

    def test_unregistered_user_default_skipped(self, registry):
        registry.set_default_resource("ec2", "volumes")
        assert registry.default_resource("ec2") == "instances"

    def test_unknown_service(self, registry):
        assert registry.default_resource("nope") == ""

    def test_display_name(self, registry):
        assert registry.display_name("ec2") == "EC2"
        assert registry.display_name("sqs") == "sqs"
        registry.set_display_name("sqs", "SQS")
        assert registry.display_name("sqs") == "SQS"


class TestAliases:
    """별칭 해석 테스트"""

    def test_service_alias(self, registry):
        assert registry.resolve_alias("cfn") == ("cloudformation", "", True)

    def test_service_resource_alias(self, registry):
        assert registry.resolve_alias("logs") == ("cloudwatch", "log-groups", True)

    def test_unknown_alias(self, registry):
        assert registry.resolve_alias("ec2") == ("ec2", "", False)

    def test_aliases_for_service(self, registry):
        registry.register_alias("stacks", "cloudformation/stacks")
        assert registry.aliases_for_service("cloudformation") == ["cfn", "stacks"]

    def test_resolve(self, registry):
        """별칭 → 기본 리소스까지 반영"""
        assert registry.resolve("cfn").key == "cloudformation/stacks"
        assert registry.resolve("logs").key == "cloudwatch/log-groups"
        assert registry.resolve("cfn", "resources").key == "cloudformation/resources"

    def test_resolve_not_registered(self, registry):
        with pytest.raises(NotRegisteredError):
            registry.resolve("ec2", "volumes")
        with pytest.raises(NotRegisteredError):
            registry.resolve("nope")


class TestSearch:
    """검색 테스트"""

    def test_exact(self, registry):
        hits = registry.search("sqs")
        assert hits[0].service == "sqs"
        assert hits[0].score == 1.0
        assert hits[0].match_type == "exact"

    def test_prefix(self, registry):
        hits = registry.search("cloudw")
        assert {h.resource for h in hits} == {"log-groups", "log-streams"}
        assert all(h.match_type == "prefix" for h in hits)

    def test_contains(self, registry):
        hits = registry.search("stream")
        assert hits[0].resource == "log-streams"
        assert hits[0].score == 0.85

    def test_alias(self, registry):
        hits = registry.search("cfn")
        assert {(h.service, h.resource) for h in hits} == {
            ("cloudformation", "stacks"),
            ("cloudformation", "resources"),
        }
        assert hits[0].match_type == "alias"

    def test_fuzzy(self, registry):
        """오타도 fuzzy로 찾음"""
        hits = registry.search("instnces")
        assert hits
        assert hits[0].resource == "instances"
        assert hits[0].match_type == "fuzzy"
        assert 0.4 <= hits[0].score <= 0.7

    def test_empty_query(self, registry):
        assert registry.search("  ") == []

    def test_limit(self, registry):
        assert len(registry.search("c", limit=2)) == 2


class TestGlobalRegistry:
    """전역 레지스트리 테스트"""

    def test_singleton_and_reset(self):
        first = get_registry()
        assert get_registry() is first
        reset_registry()
        assert get_registry() is not first

    def test_loaded_with_catalog(self):
        """패키지 카탈로그의 별칭 사용"""
        assert get_registry().resolve_alias("cfn") == ("cloudformation", "", True)

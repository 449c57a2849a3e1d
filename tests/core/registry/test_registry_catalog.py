"""
tests/core/registry/test_registry_catalog.py - 서비스 카탈로그 테스트
"""

import pytest

from core.exceptions import ConfigError
from core.registry import load_catalog, parse_catalog


class TestParseCatalog:
    """parse_catalog 테스트"""

    def test_full(self):
        catalog = parse_catalog(
            {
                "aliases": {"cfn": "cloudformation"},
                "display_names": {"ec2": "EC2"},
                "categories": [{"name": "Compute", "services": ["ec2", "lambda"]}],
                "default_resources": {"ec2": "instances"},
                "sub_resources": ["cloudformation/resources"],
            }
        )

        assert catalog.aliases == {"cfn": "cloudformation"}
        assert catalog.display_names == {"ec2": "EC2"}
        assert catalog.categories[0].name == "Compute"
        assert catalog.categories[0].services == ("ec2", "lambda")
        assert catalog.default_resources == {"ec2": "instances"}
        assert "cloudformation/resources" in catalog.sub_resources

    def test_empty_sections(self):
        catalog = parse_catalog({"aliases": None})
        assert catalog.aliases == {}
        assert catalog.categories == ()

    def test_not_mapping(self):
        with pytest.raises(ConfigError):
            parse_catalog(["a"])

    def test_category_without_name(self):
        with pytest.raises(ConfigError):
            parse_catalog({"categories": [{"services": ["ec2"]}]})


class TestLoadCatalog:
    """패키지 카탈로그 파일 테스트"""

    def test_packaged_catalog(self):
        """기본 catalog.yaml의 주요 항목"""
        catalog = load_catalog()

        assert catalog.aliases["cfn"] == "cloudformation"
        assert catalog.aliases["logs"] == "cloudwatch/log-groups"
        assert catalog.aliases["profile"] == "local/profile"
        assert catalog.display_names["compute-optimizer"] == "Compute Optimizer"
        assert "cloudwatch/log-streams" in catalog.sub_resources

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            load_catalog(tmp_path / "missing.yaml")

    def test_custom_file(self, tmp_path):
        path = tmp_path / "catalog.yaml"
        path.write_text("aliases:\n  q: sqs\n", encoding="utf-8")
        assert load_catalog(path).aliases == {"q": "sqs"}

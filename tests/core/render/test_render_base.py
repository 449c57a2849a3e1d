"""
tests/core/render/test_render_base.py - Renderer 계약 테스트
"""

from core.dao import BaseResource
from core.render import (
    BaseRenderer,
    Column,
    MetricSpec,
    Navigation,
    SummaryField,
    metric_spec_for,
    navigations_for,
    tags_column,
)


class NavigatingRenderer(BaseRenderer):
    def __init__(self):
        super().__init__("ec2", "instances")

    def navigations(self, resource):
        return [Navigation("v", "VPC", "vpc", "vpcs", "VpcId", resource.get_field("VpcId"))]

    def metric_spec(self):
        return MetricSpec("AWS/EC2", "CPUUtilization", "InstanceId")


class TestBaseRenderer:
    """BaseRenderer 테스트"""

    def test_names_and_columns_copy(self):
        renderer = BaseRenderer("ec2", "instances", [Column("ID", 20, getter=lambda r: r.id)])
        assert renderer.service_name == "ec2"
        assert renderer.resource_type == "instances"

        renderer.columns().clear()
        assert len(renderer.columns()) == 1

    def test_render_row(self):
        renderer = BaseRenderer(
            "ec2",
            "instances",
            [
                Column("ID", 20, getter=lambda r: r.id),
                Column("COUNT", 5, getter=lambda r: r.get_field("Count")),
                Column("EMPTY", 5),
            ],
        )
        row = renderer.render_row(BaseResource(id="i-1", data={"Count": 3}))
        assert row == ["i-1", "3", ""]

    def test_getter_errors_become_empty(self):
        """getter 예외는 빈 셀로 처리"""
        renderer = BaseRenderer(
            "ec2",
            "instances",
            [
                Column("BAD", 5, getter=lambda r: r.data["missing"]),
                Column("NONE", 5, getter=lambda r: None),
            ],
        )
        assert renderer.render_row(BaseResource(id="i-1", data={})) == ["", ""]

    def test_render_row_with_subset(self):
        id_col = Column("ID", 20, getter=lambda r: r.id)
        renderer = BaseRenderer("ec2", "instances", [id_col, Column("X", 5, getter=lambda r: "x")])
        assert renderer.render_row(BaseResource(id="i-1"), [id_col]) == ["i-1"]

    def test_render_summary(self):
        renderer = BaseRenderer("ec2", "instances")
        assert renderer.render_summary(BaseResource(id="i-1", name="web")) == [
            SummaryField("ID", "i-1"),
            SummaryField("Name", "web"),
        ]
        assert renderer.render_summary(BaseResource(id="i-1")) == [SummaryField("ID", "i-1")]

    def test_default_detail_empty(self):
        assert BaseRenderer("ec2", "instances").render_detail(BaseResource(id="i-1")) == ""


class TestOptionalCapabilities:
    """Navigator / MetricSpecProvider 테스트"""

    def test_navigations(self):
        navs = navigations_for(NavigatingRenderer(), BaseResource(id="i-1", data={"VpcId": "vpc-1"}))
        assert navs[0].filter_value == "vpc-1"
        assert navs[0].reload_interval == 3.0

    def test_no_navigations(self):
        assert navigations_for(BaseRenderer("sqs", "queues"), BaseResource(id="q")) == []

    def test_metric_spec(self):
        assert metric_spec_for(NavigatingRenderer()).namespace == "AWS/EC2"
        assert metric_spec_for(BaseRenderer("sqs", "queues")) is None


class TestTagsColumn:
    def test_getter(self):
        col = tags_column(width=30)
        assert col.name == "TAGS"
        assert col.getter(BaseResource(id="x", tags={"Env": "prod", "Name": "web"})) == "Env=prod"

"""Tests for attribute value and block marshalling."""

import logging
import pytest
from hclplan.convert.values import marshal_attribute_values, marshal_block, to_json_value
from hclplan.ingest.models import Attribute, Block
from hclplan.utils.errors import PlanSerializationError


class TestMarshalAttributeValues:
    """Test attribute value marshalling."""
    
    def test_absent_values(self):
        """Test absent values marshal to None."""
        assert marshal_attribute_values("resource", None) is None
    
    def test_preserves_shapes(self):
        """Test scalars, lists and maps keep their JSON shape."""
        values = {
            "instance_type": "t3.micro",
            "cpu_credits": 2,
            "ratio": 0.5,
            "monitoring": True,
            "zones": ["a", "b"],
            "tags": {"env": "prod"},
            "missing": None,
        }
        
        assert marshal_attribute_values("resource", values) == values
    
    @pytest.mark.parametrize("block_type", ["resource", "module"])
    def test_count_skipped(self, block_type):
        """Test count meta-attribute is dropped for resources and modules."""
        result = marshal_attribute_values(block_type, {"count": 3, "name": "x"})
        
        assert result == {"name": "x"}
    
    def test_count_skip_logged(self, caplog):
        """Test skipped meta-attributes are logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="hclplan.convert.values"):
            marshal_attribute_values("resource", {"count": 3})
        
        assert "Skipping meta-attribute 'count'" in caplog.text
    
    def test_count_kept_for_sub_blocks(self):
        """Test count is plain data on other block kinds."""
        result = marshal_attribute_values("ebs_block_device", {"count": 3})
        
        assert result == {"count": 3}
    
    def test_canonical_forms(self):
        """Test tuples and sets become lists."""
        assert to_json_value(("a", 1)) == ["a", 1]
        assert to_json_value({"b", "a"}) == ["a", "b"]
        assert to_json_value({1: "x"}) == {"1": "x"}
    
    def test_unencodable_value(self):
        """Test non-JSON values raise serialization error."""
        with pytest.raises(PlanSerializationError, match="attribute 'handle'"):
            marshal_attribute_values("resource", {"handle": object()})
    
    def test_nan_rejected(self):
        """Test NaN is not valid plan JSON."""
        with pytest.raises(PlanSerializationError):
            marshal_attribute_values("resource", {"size": float("nan")})


class TestMarshalBlock:
    """Test recursive block marshalling."""
    
    def test_children_grouped_by_kind(self):
        """Test children with the same kind append in order."""
        block = Block(
            type="resource",
            type_label="aws_instance",
            name_label="web",
            attributes=[Attribute(name="ami", value="ami-1")],
            children=[
                Block(type="ebs_block_device", attributes=[Attribute(name="volume_size", value=10)]),
                Block(type="root_block_device", attributes=[Attribute(name="volume_size", value=8)]),
                Block(type="ebs_block_device", attributes=[Attribute(name="volume_size", value=20)]),
            ],
        )
        json_values = marshal_attribute_values(block.type, block.values)
        
        result = marshal_block(block, json_values)
        
        assert result is json_values
        assert json_values == {
            "ami": "ami-1",
            "ebs_block_device": [{"volume_size": 10}, {"volume_size": 20}],
            "root_block_device": [{"volume_size": 8}],
        }
    
    def test_nested_children(self):
        """Test grandchildren are nested under their parent's entry."""
        block = Block(
            type="resource",
            type_label="aws_lb_listener",
            name_label="front",
            children=[
                Block(
                    type="default_action",
                    attributes=[Attribute(name="type", value="forward")],
                    children=[Block(type="forward", attributes=[Attribute(name="stickiness", value=False)])],
                ),
            ],
        )
        json_values = {}
        
        marshal_block(block, json_values)
        
        assert json_values == {
            "default_action": [{"type": "forward", "forward": [{"stickiness": False}]}],
        }
    
    def test_absent_child_values(self):
        """Test a child with absent values and no children marshals to None."""
        block = Block(
            type="resource",
            type_label="aws_instance",
            name_label="web",
            children=[Block(type="credit_specification", values=None)],
        )
        json_values = {}
        
        marshal_block(block, json_values)
        
        assert json_values == {"credit_specification": [None]}
    
    def test_leaf_block_unchanged(self):
        """Test blocks without children leave the map alone."""
        block = Block(type="resource", type_label="aws_eip", name_label="ip")
        json_values = {"vpc": True}
        
        marshal_block(block, json_values)
        
        assert json_values == {"vpc": True}

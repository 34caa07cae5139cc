"""Tests for block tree models."""

from hclplan.ingest.models import Attribute, Block, Module


class TestBlock:
    """Test derived block properties."""
    
    def test_values_built_from_attributes(self):
        """Test values default to the attribute map."""
        block = Block(
            type="resource",
            type_label="aws_instance",
            name_label="web",
            attributes=[
                Attribute(name="ami", value="ami-123"),
                Attribute(name="count", value=2),
            ],
        )
        
        assert block.values == {"ami": "ami-123", "count": 2}
    
    def test_explicit_absent_values(self):
        """Test explicitly absent values stay None."""
        block = Block(type="resource", type_label="aws_instance", name_label="web",
                      attributes=[Attribute(name="ami", value="ami-123")], values=None)
        
        assert block.values is None
    
    def test_root_names(self):
        """Test names of a root module resource."""
        block = Block(type="resource", type_label="aws_instance", name_label="web")
        
        assert block.local_name == "aws_instance.web"
        assert block.full_name == "aws_instance.web"
        assert block.module_address == ""
        assert not block.has_module_block
    
    def test_module_names(self):
        """Test module name implies a module call address."""
        block = Block(type="resource", type_label="aws_subnet", name_label="a",
                      module_name="net", module_source="./modules/net")
        
        assert block.has_module_block
        assert block.module_address == "module.net"
        assert block.full_name == "module.net.aws_subnet.a"
        assert block.local_name == "aws_subnet.a"
    
    def test_provider_from_type_prefix(self):
        """Test provider falls back to the resource type prefix."""
        block = Block(type="resource", type_label="google_compute_instance", name_label="vm")
        
        assert block.provider == "google"
    
    def test_provider_from_attribute(self):
        """Test explicit provider attribute wins."""
        block = Block(type="resource", type_label="aws_instance", name_label="web",
                      attributes=[Attribute(name="provider", value="aws.east")])
        
        assert block.provider == "aws.east"
    
    def test_get_attribute(self):
        """Test attribute lookup by name."""
        attr = Attribute(name="region", value="us-east-1")
        block = Block(type="provider", type_label="aws", attributes=[attr])
        
        assert block.get_attribute("region") == attr
        assert block.get_attribute("alias") is None


class TestModule:
    """Test module helpers."""
    
    def test_resource_blocks(self):
        """Test only resource blocks are returned."""
        module = Module(blocks=[
            Block(type="provider", type_label="aws"),
            Block(type="resource", type_label="aws_instance", name_label="web"),
            Block(type="variable", type_label="region"),
        ])
        
        assert [b.local_name for b in module.resource_blocks()] == ["aws_instance.web"]

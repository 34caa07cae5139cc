"""Tests for module tree loader."""

import json
import tempfile
from pathlib import Path
import pytest
from hclplan.ingest.module_loader import load_modules, parse_modules, summarize_modules
from hclplan.utils.errors import ModuleLoadError


MODULE_DATA = {
    "modules": [
        {
            "name": "",
            "blocks": [
                {"type": "provider", "type_label": "aws",
                 "attributes": [{"name": "region", "value": "us-east-1"}]},
                {"type": "resource", "type_label": "aws_instance", "name_label": "web",
                 "attributes": [{"name": "instance_type", "value": "t3.micro"}]},
            ]
        }
    ]
}


def _write(content: str, suffix: str) -> str:
    with tempfile.NamedTemporaryFile(mode='w', suffix=suffix, delete=False) as f:
        f.write(content)
        return f.name


class TestModuleLoader:
    """Test module tree file loading."""
    
    def test_load_json(self):
        """Test loading a JSON module tree."""
        temp_path = _write(json.dumps(MODULE_DATA), '.json')
        try:
            modules = load_modules(temp_path)
            assert len(modules) == 1
            assert modules[0].blocks[1].local_name == "aws_instance.web"
        finally:
            Path(temp_path).unlink()
    
    def test_load_yaml(self):
        """Test loading a YAML module tree."""
        content = (
            "modules:\n"
            "  - name: root\n"
            "    blocks:\n"
            "      - type: resource\n"
            "        type_label: aws_s3_bucket\n"
            "        name_label: logs\n"
        )
        temp_path = _write(content, '.yaml')
        try:
            modules = load_modules(temp_path)
            assert modules[0].name == "root"
            assert modules[0].blocks[0].type_label == "aws_s3_bucket"
        finally:
            Path(temp_path).unlink()
    
    def test_load_missing_file(self):
        """Test loading non-existent file raises error."""
        with pytest.raises(ModuleLoadError, match="Module file not found"):
            load_modules("nonexistent.json")
    
    def test_load_invalid_json(self):
        """Test loading invalid JSON raises error."""
        temp_path = _write("invalid json {", '.json')
        try:
            with pytest.raises(ModuleLoadError, match="Invalid JSON"):
                load_modules(temp_path)
        finally:
            Path(temp_path).unlink()
    
    def test_parse_list_of_modules(self):
        """Test a bare list of modules is accepted."""
        modules = parse_modules(MODULE_DATA["modules"])
        assert len(modules) == 1
    
    def test_parse_missing_modules_key(self):
        """Test mapping without modules key is rejected."""
        with pytest.raises(ModuleLoadError, match="'modules' key"):
            parse_modules({"blocks": []})
    
    def test_parse_invalid_block(self):
        """Test block without a type is rejected."""
        with pytest.raises(ModuleLoadError, match="Invalid module at index 0"):
            parse_modules([{"blocks": [{"type_label": "aws_instance"}]}])
    
    def test_summarize(self):
        """Test module summary counts."""
        summary = summarize_modules(parse_modules(MODULE_DATA))
        assert summary == {"modules": 1, "blocks": 2, "resources": 1, "providers": 1}

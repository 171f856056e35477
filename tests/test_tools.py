"""
Tests for MCP tools.

Tests the transform and analysis tool implementations against a mock
server that only records what gets registered.
"""

import json

import pytest
import yaml

from chuk_mcp_pcset.tools import register_analysis_tools, register_transform_tools


# Mock MCP server for testing tools
class MockMCPServer:
    """Mock MCP server that just stores registered tools."""

    def __init__(self, name: str):
        self.name = name
        self.tools: dict = {}

    def tool(self, func):
        """Decorator to register a tool."""
        self.tools[func.__name__] = func
        return func


@pytest.fixture
def transform_tools():
    """Transform tools registered on a mock server."""
    return register_transform_tools(MockMCPServer("test"))


@pytest.fixture
def analysis_tools():
    """Analysis tools registered on a mock server."""
    return register_analysis_tools(MockMCPServer("test"))


class TestRegistration:
    """Tests for tool registration."""

    def test_transform_tools_registered(self):
        """All transform tools are registered on the server."""
        mcp = MockMCPServer("test")
        tools = register_transform_tools(mcp)
        expected = {
            "pcset_transpose",
            "pcset_transpose_to",
            "pcset_invert",
            "pcset_invert_by_pair",
        }
        assert set(tools) == expected
        assert set(mcp.tools) == expected

    def test_analysis_tools_registered(self):
        """All analysis tools are registered on the server."""
        mcp = MockMCPServer("test")
        tools = register_analysis_tools(mcp)
        expected = {"pcset_normal_form", "pcset_prime_form", "pcset_analyze"}
        assert set(tools) == expected
        assert set(mcp.tools) == expected


class TestTransformTools:
    """Tests for transposition and inversion tools."""

    @pytest.mark.asyncio
    async def test_transpose(self, transform_tools):
        """Transpose by names."""
        result = await transform_tools["pcset_transpose"](pitch_classes=["C", "D", "F"], level=3)
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["transform"]["operation"] == "transpose"
        assert data["transform"]["result"] == ["Eb", "F", "Ab"]
        assert data["transform"]["result_integers"] == [3, 5, 8]

    @pytest.mark.asyncio
    async def test_transpose_integers(self, transform_tools):
        """Transpose by integers, negative level."""
        result = await transform_tools["pcset_transpose"](pitch_classes=[0, 1, 4], level=-3)
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["transform"]["result_integers"] == [9, 10, 1]
        assert data["transform"]["level"] == 9

    @pytest.mark.asyncio
    async def test_transpose_unknown_pitch_class(self, transform_tools):
        """Unknown names return an error."""
        result = await transform_tools["pcset_transpose"](pitch_classes=["C", "H"], level=1)
        data = json.loads(result)
        assert data["status"] == "error"
        assert "H" in data["message"]

    @pytest.mark.asyncio
    async def test_transpose_to(self, transform_tools):
        """Transpose so the first element lands on start."""
        result = await transform_tools["pcset_transpose_to"](pitch_classes=[1, 3, 7], start=0)
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["transform"]["result_integers"] == [0, 2, 6]
        assert data["transform"]["level"] == 11

    @pytest.mark.asyncio
    async def test_transpose_to_empty(self, transform_tools):
        """Empty sets are accepted."""
        result = await transform_tools["pcset_transpose_to"](pitch_classes=[], start=4)
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["transform"]["result"] == []

    @pytest.mark.asyncio
    async def test_invert(self, transform_tools):
        """Invert reverses the order."""
        result = await transform_tools["pcset_invert"](pitch_classes=["C", "D", "F"], level=4)
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["transform"]["operation"] == "invert"
        assert data["transform"]["result"] == ["B", "D", "E"]

    @pytest.mark.asyncio
    async def test_invert_by_pair(self, transform_tools):
        """Invert by a pair of names."""
        result = await transform_tools["pcset_invert_by_pair"](
            pitch_classes=["G", "Ab", "B"], pair=["G", "B"]
        )
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["transform"]["level"] == 6
        assert data["transform"]["result"] == ["G", "Bb", "B"]

    @pytest.mark.asyncio
    async def test_invert_by_pair_level_wraps(self, transform_tools):
        """A pair summing past 11 reports the reduced level and matches pcset_invert."""
        by_pair = json.loads(
            await transform_tools["pcset_invert_by_pair"](
                pitch_classes=["C", "D", "F"], pair=["B", "A"]
            )
        )
        direct = json.loads(
            await transform_tools["pcset_invert"](pitch_classes=["C", "D", "F"], level=8)
        )
        assert by_pair["status"] == "success"
        assert by_pair["transform"]["level"] == 8
        assert by_pair["transform"]["result_integers"] == [3, 6, 8]
        assert by_pair["transform"]["result"] == direct["transform"]["result"]

    @pytest.mark.asyncio
    async def test_invert_by_pair_wrong_length(self, transform_tools):
        """Pairs must have two members."""
        result = await transform_tools["pcset_invert_by_pair"](
            pitch_classes=["G", "Ab"], pair=["G"]
        )
        data = json.loads(result)
        assert data["status"] == "error"
        assert "exactly two" in data["message"]


class TestAnalysisTools:
    """Tests for normal form, prime form and analysis tools."""

    @pytest.mark.asyncio
    async def test_normal_form(self, analysis_tools):
        """Normal form with a packing tie-break."""
        result = await analysis_tools["pcset_normal_form"](pitch_classes=["F", "Ab", "A", "C#"])
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["normal_form"] == ["C#", "F", "Ab", "A"]
        assert data["integers"] == [1, 5, 8, 9]

    @pytest.mark.asyncio
    async def test_prime_form(self, analysis_tools):
        """Prime form from names."""
        result = await analysis_tools["pcset_prime_form"](pitch_classes=["Bb", "F", "A"])
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["prime_form"] == [0, 1, 5]

    @pytest.mark.asyncio
    async def test_prime_form_rahn(self, analysis_tools):
        """Prime form under the Rahn convention."""
        prime_form = analysis_tools["pcset_prime_form"]
        forte = json.loads(await prime_form(pitch_classes=[0, 1, 3, 7, 8]))
        rahn = json.loads(await prime_form(pitch_classes=[0, 1, 3, 7, 8], algorithm="rahn"))
        assert forte["prime_form"] == [0, 1, 3, 7, 8]
        assert forte["algorithm"] == "forte"
        assert rahn["status"] == "success"
        assert rahn["prime_form"] == [0, 1, 5, 6, 8]
        assert rahn["algorithm"] == "rahn"

    @pytest.mark.asyncio
    async def test_prime_form_invalid_algorithm(self, analysis_tools):
        """Unknown conventions return an error."""
        result = await analysis_tools["pcset_prime_form"](pitch_classes=["C"], algorithm="carter")
        data = json.loads(result)
        assert data["status"] == "error"
        assert "carter" in data["message"]

    @pytest.mark.asyncio
    async def test_prime_form_error(self, analysis_tools):
        """Bad input returns an error."""
        result = await analysis_tools["pcset_prime_form"](pitch_classes=["Cbb"])
        data = json.loads(result)
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_analyze_json(self, analysis_tools):
        """Full analysis as JSON."""
        result = await analysis_tools["pcset_analyze"](pitch_classes=["Cs", "F", "Fs", "G"])
        data = json.loads(result)
        assert data["status"] == "success"
        analysis = data["analysis"]
        assert analysis["normal_form"] == ["C#", "F", "F#", "G"]
        assert analysis["prime_form"] == [0, 1, 2, 6]
        assert analysis["total_span"] == 6
        assert analysis["intervals"] == [4, 1, 1]

    @pytest.mark.asyncio
    async def test_analyze_yaml(self, analysis_tools):
        """Full analysis as YAML."""
        result = await analysis_tools["pcset_analyze"](
            pitch_classes=["E", "Ab", "A", "B", "C"], output_format="yaml"
        )
        data = json.loads(result)
        assert data["status"] == "success"
        doc = yaml.safe_load(data["yaml"])
        assert doc["normal_form"]["pitch_classes"] == ["Ab", "A", "B", "C", "E"]
        assert doc["prime_form"] == [0, 1, 3, 4, 8]

    @pytest.mark.asyncio
    async def test_analyze_rahn(self, analysis_tools):
        """Analysis with the Rahn prime form."""
        result = await analysis_tools["pcset_analyze"](
            pitch_classes=[0, 1, 3, 6, 8, 9], algorithm="rahn"
        )
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["analysis"]["prime_form"] == [0, 2, 3, 6, 7, 9]
        assert data["analysis"]["prime_form_algorithm"] == "rahn"

    @pytest.mark.asyncio
    async def test_analyze_invalid_algorithm(self, analysis_tools):
        """Unknown prime form conventions return an error."""
        result = await analysis_tools["pcset_analyze"](pitch_classes=["C"], algorithm="carter")
        data = json.loads(result)
        assert data["status"] == "error"
        assert "carter" in data["message"]

    @pytest.mark.asyncio
    async def test_analyze_invalid_format(self, analysis_tools):
        """Unknown output formats return an error."""
        result = await analysis_tools["pcset_analyze"](pitch_classes=["C"], output_format="xml")
        data = json.loads(result)
        assert data["status"] == "error"
        assert "xml" in data["message"]

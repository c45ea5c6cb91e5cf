"""
Tests for MCP tools.

Tests the MCP tool implementations for intervals and chords.
"""

import json

import pytest

from chuk_mcp_harmony.core import REGISTRY
from chuk_mcp_harmony.tools import register_chord_tools, register_interval_tools


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
def interval_tools():
    """Interval tools registered on a mock server."""
    return register_interval_tools(MockMCPServer("test"))


@pytest.fixture
def chord_tools():
    """Chord tools registered on a mock server."""
    return register_chord_tools(MockMCPServer("test"), REGISTRY)


class TestRegistration:
    """Tests for tool registration."""

    def test_interval_tools_registered(self):
        """Interval tools are registered on the server."""
        mcp = MockMCPServer("test")
        tools = register_interval_tools(mcp)
        assert set(tools) == {"harmony_describe_interval", "harmony_interval_between"}
        assert set(mcp.tools) == set(tools)

    def test_chord_tools_registered(self):
        """Chord tools are registered on the server."""
        mcp = MockMCPServer("test")
        tools = register_chord_tools(mcp, REGISTRY)
        assert set(tools) == {
            "harmony_list_chord_qualities",
            "harmony_describe_chord_quality",
            "harmony_identify_quality",
            "harmony_identify_chord",
            "harmony_build_chord",
        }
        assert set(mcp.tools) == set(tools)


class TestIntervalTools:
    """Tests for interval tools."""

    @pytest.mark.asyncio
    async def test_describe_interval(self, interval_tools):
        """Describe a natural interval."""
        result = await interval_tools["harmony_describe_interval"](name="M3")
        data = json.loads(result)
        assert data["status"] == "success"
        interval = data["interval"]
        assert interval["name"] == "M3"
        assert interval["long_name"] == "Major 3rd"
        assert interval["semitones"] == 4
        assert interval["number"] == 3
        assert interval["quality"] == "major"
        assert interval["inverse"] == "m6"

    @pytest.mark.asyncio
    async def test_describe_augmented_interval(self, interval_tools):
        """Describe an altered interval."""
        result = await interval_tools["harmony_describe_interval"](name="A4")
        interval = json.loads(result)["interval"]
        assert interval["semitones"] == 6
        assert interval["natural_semitones"] == 5
        assert interval["accidentals"] == 1
        assert interval["number"] == 4
        assert interval["quality"] == "augmented"

    @pytest.mark.asyncio
    async def test_describe_tritone(self, interval_tools):
        """The tritone has no number or quality."""
        result = await interval_tools["harmony_describe_interval"](name="Tritone")
        interval = json.loads(result)["interval"]
        assert interval["name"] == "TT"
        assert interval["number"] is None
        assert interval["quality"] is None

    @pytest.mark.asyncio
    async def test_describe_unknown_interval(self, interval_tools):
        """Unknown names return an error."""
        result = await interval_tools["harmony_describe_interval"](name="X3")
        data = json.loads(result)
        assert data["status"] == "error"
        assert "X3" in data["message"]

    @pytest.mark.asyncio
    async def test_interval_between_pitch_classes(self, interval_tools):
        """Measure between pitch classes."""
        result = await interval_tools["harmony_interval_between"](a="C", b="E")
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["interval"]["name"] == "M3"

    @pytest.mark.asyncio
    async def test_interval_between_wraps(self, interval_tools):
        """Descending pitch classes wrap into the octave."""
        result = await interval_tools["harmony_interval_between"](a="E", b="C")
        assert json.loads(result)["interval"]["name"] == "m6"

    @pytest.mark.asyncio
    async def test_interval_between_pitches(self, interval_tools):
        """Measure between octave-qualified pitches."""
        result = await interval_tools["harmony_interval_between"](a="C4", b="G4")
        assert json.loads(result)["interval"]["name"] == "P5"

    @pytest.mark.asyncio
    async def test_interval_between_mixed(self, interval_tools):
        """Mixed pitch kinds return an error."""
        result = await interval_tools["harmony_interval_between"](a="C", b="E4")
        data = json.loads(result)
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_interval_between_malformed(self, interval_tools):
        """Unparseable pitches return an error."""
        result = await interval_tools["harmony_interval_between"](a="H", b="C")
        assert json.loads(result)["status"] == "error"


class TestChordQualityTools:
    """Tests for chord quality tools."""

    @pytest.mark.asyncio
    async def test_list_chord_qualities(self, chord_tools):
        """List every built-in quality."""
        result = await chord_tools["harmony_list_chord_qualities"]()
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["count"] == 19
        assert data["qualities"][0]["name"] == "Major"
        assert data["qualities"][0]["abbrs"] == ["", "M"]
        assert data["qualities"][0]["semitones"] == [0, 4, 7]

    @pytest.mark.asyncio
    async def test_describe_chord_quality(self, chord_tools):
        """Describe a quality by abbreviation."""
        result = await chord_tools["harmony_describe_chord_quality"](name="m7")
        data = json.loads(result)
        assert data["status"] == "success"
        quality = data["quality"]
        assert quality["name"] == "Min 7th"
        assert quality["full_name"] == "Minor 7th"
        assert quality["intervals"] == ["P1", "m3", "P5", "m7"]
        assert quality["inversion"] is None

    @pytest.mark.asyncio
    async def test_describe_unknown_quality(self, chord_tools):
        """Unknown qualities return an error."""
        result = await chord_tools["harmony_describe_chord_quality"](name="Foo")
        data = json.loads(result)
        assert data["status"] == "error"
        assert "Foo" in data["message"]

    @pytest.mark.asyncio
    async def test_identify_quality_from_names(self, chord_tools):
        """Identify a quality from interval names."""
        result = await chord_tools["harmony_identify_quality"](intervals=["P1", "m3", "P5"])
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["quality"]["name"] == "Minor"
        assert data["quality"]["inversion"] is None

    @pytest.mark.asyncio
    async def test_identify_quality_inversion(self, chord_tools):
        """A third in the bass is reported as the first inversion."""
        result = await chord_tools["harmony_identify_quality"](intervals=["M3", "P1", "P5"])
        data = json.loads(result)
        assert data["quality"]["name"] == "Major"
        assert data["quality"]["inversion"] == 1

    @pytest.mark.asyncio
    async def test_identify_quality_from_semitones(self, chord_tools):
        """Identify a quality from semitone counts."""
        result = await chord_tools["harmony_identify_quality"](intervals=[0, 4, 7, 10])
        assert json.loads(result)["quality"]["name"] == "Dom 7th"

    @pytest.mark.asyncio
    async def test_identify_quality_no_match(self, chord_tools):
        """Unknown interval sets return an error."""
        result = await chord_tools["harmony_identify_quality"](intervals=[0, 1, 2])
        data = json.loads(result)
        assert data["status"] == "error"
        assert "No chord quality matches" in data["message"]


class TestChordTools:
    """Tests for chord tools."""

    @pytest.mark.asyncio
    async def test_identify_chord(self, chord_tools):
        """Identify a chord from pitch classes."""
        result = await chord_tools["harmony_identify_chord"](pitches=["A", "C#", "E"])
        data = json.loads(result)
        assert data["status"] == "success"
        chord = data["chord"]
        assert chord["name"] == "A Major"
        assert chord["abbr"] == "A"
        assert chord["root"] == "A"
        assert chord["notes"] == ["A", "C#", "E"]

    @pytest.mark.asyncio
    async def test_identify_chord_pitches(self, chord_tools):
        """Identify a chord from octave-qualified pitches."""
        result = await chord_tools["harmony_identify_chord"](pitches=["A3", "C#4", "E4"])
        chord = json.loads(result)["chord"]
        assert chord["name"] == "A3 Major"
        assert chord["notes"] == ["A3", "C#4", "E4"]

    @pytest.mark.asyncio
    async def test_identify_chord_inverted(self, chord_tools):
        """The first pitch is taken as root and bass."""
        result = await chord_tools["harmony_identify_chord"](pitches=["C", "E", "G", "B♭"])
        chord = json.loads(result)["chord"]
        assert chord["full_name"] == "C Dominant 7th"

    @pytest.mark.asyncio
    async def test_identify_chord_mixed(self, chord_tools):
        """Mixed pitch kinds return an error."""
        result = await chord_tools["harmony_identify_chord"](pitches=["A", "C#4", "E"])
        assert json.loads(result)["status"] == "error"

    @pytest.mark.asyncio
    async def test_identify_chord_empty(self, chord_tools):
        """An empty pitch list returns an error."""
        result = await chord_tools["harmony_identify_chord"](pitches=[])
        assert json.loads(result)["status"] == "error"

    @pytest.mark.asyncio
    async def test_build_chord(self, chord_tools):
        """Spell a chord from its name."""
        result = await chord_tools["harmony_build_chord"](chord="E7")
        data = json.loads(result)
        assert data["status"] == "success"
        chord = data["chord"]
        assert chord["name"] == "E Dom 7th"
        assert chord["notes"] == ["E", "G#", "B", "D"]
        assert chord["inversion"] == 0

    @pytest.mark.asyncio
    async def test_build_chord_with_octave(self, chord_tools):
        """Octave-qualified roots spell pitches."""
        result = await chord_tools["harmony_build_chord"](chord="E4 Major")
        chord = json.loads(result)["chord"]
        assert chord["notes"] == ["E4", "G#4", "B4"]

    @pytest.mark.asyncio
    async def test_build_chord_inversion(self, chord_tools):
        """Build an inverted chord by letter."""
        result = await chord_tools["harmony_build_chord"](chord="C Major", inversion="b")
        chord = json.loads(result)["chord"]
        assert chord["notes"] == ["E", "G", "C"]
        assert chord["bass"] == "E"
        assert chord["inversion"] == 1
        assert chord["quality"]["inversion"] == 1

    @pytest.mark.asyncio
    async def test_build_chord_inversion_number(self, chord_tools):
        """Build an inverted chord by number."""
        result = await chord_tools["harmony_build_chord"](chord="G7", inversion=3)
        chord = json.loads(result)["chord"]
        assert chord["notes"] == ["F", "G", "B", "D"]

    @pytest.mark.asyncio
    async def test_build_chord_bad_inversion(self, chord_tools):
        """Out-of-range inversions return an error."""
        result = await chord_tools["harmony_build_chord"](chord="C", inversion=3)
        assert json.loads(result)["status"] == "error"

    @pytest.mark.asyncio
    async def test_build_chord_unknown_quality(self, chord_tools):
        """Unknown qualities return an error."""
        result = await chord_tools["harmony_build_chord"](chord="C Foo")
        data = json.loads(result)
        assert data["status"] == "error"
        assert "not a chord name" in data["message"]

    @pytest.mark.asyncio
    async def test_build_chord_malformed(self, chord_tools):
        """Names without a root return an error."""
        result = await chord_tools["harmony_build_chord"](chord="Major")
        assert json.loads(result)["status"] == "error"

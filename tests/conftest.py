import xml.etree.ElementTree as ET

import pytest

from patterncard.palette import PALETTES
from patterncard.rng import SeededGenerator

SVG_NS = "{http://www.w3.org/2000/svg}"


def parse(document: str) -> ET.Element:
    return ET.fromstring(document.encode("utf-8"))


def local(tag: str) -> str:
    return tag.replace(SVG_NS, "")


def drawn(root: ET.Element) -> list[ET.Element]:
    """Top-level elements after <defs> and the background rect."""
    children = [child for child in root if local(child.tag) != "defs"]
    return children[1:]


@pytest.fixture
def rng() -> SeededGenerator:
    return SeededGenerator.new("fixture-seed")


@pytest.fixture
def palette():
    return PALETTES["mono_accent"]

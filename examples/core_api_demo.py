#!/usr/bin/env python3
"""Core Parser API Demo.

This example walks through the two API levels: the module-level parse
functions and the configured XMLParser class, followed by tree search and
mutation.
"""

import logging
import sys
import tempfile
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

import light_xml_parser as lxp


def demo_level_1_simple_api():
    """Demonstrate Level 1: Simple parsing functions."""
    print("=" * 60)
    print("LEVEL 1: Simple API Functions")
    print("=" * 60)

    print("\n1. String parsing (attributes are dropped):")
    xml_content = '''
    <?xml version="1.0"?>
    <library>
        <book id="1" author="Jane Smith">
            <title>XML Processing Guide</title>
            <year>2023</year>
        </book>
        <book id="2" author="John Doe">
            <title>Advanced Parsing</title>
            <year>2024</year>
            <reprint/>
        </book>
    </library>
    '''

    tree = lxp.parse_string(xml_content)
    print(f"Root tag: {tree.root.tag}")
    print(f"Elements: {tree.element_count}")
    for title in tree.find_by_tag("title"):
        print(f"  - {title.data}")

    print("\n2. Malformed XML fails fast:")
    try:
        lxp.parse_string("<root><unclosed>content</root>")
    except lxp.XMLParseError as e:
        print(f"XMLParseError: {e}")

    print("\n3. Bytes input with byte order mark:")
    tree = lxp.parse("<root><item>café</item></root>".encode("utf-16"))
    print(f"Rendered: {tree}")


def demo_level_2_configured_parser():
    """Demonstrate Level 2: XMLParser with configuration."""
    print("\n" + "=" * 60)
    print("LEVEL 2: Configured Parser")
    print("=" * 60)

    with tempfile.TemporaryDirectory() as tmp_dir:
        xml_file = Path(tmp_dir) / "notes.xml"
        xml_file.write_text("<note>\nfirst line\nsecond line\n</note>\n", encoding="utf-8")

        stripped = lxp.XMLParser.from_file(xml_file).parse_xml()
        print(f"Default reader: {stripped.root.data!r}")

        config = lxp.ParserConfig.preserve_line_breaks()
        preserved = lxp.XMLParser.from_file(xml_file, config=config).parse_xml()
        print(f"Preserving line breaks: {preserved.root.data!r}")

    config = lxp.ParserConfig().override(global___max_input_length=16)
    try:
        lxp.XMLParser("<a>too long for the limit</a>", config=config).parse_xml()
    except lxp.XMLParseError as e:
        print(f"Length limit: {e}")


def demo_tree_operations():
    """Demonstrate search and append on a parsed tree."""
    print("\n" + "=" * 60)
    print("TREE OPERATIONS")
    print("=" * 60)

    tree = lxp.parse_string("<root><tag1>a<tag2>x</tag2></tag1><tag1>b</tag1></root>")
    print(f"find_by_tag('tag1'): {[node.data for node in tree.find_by_tag('tag1')]}")
    print(f"find_by_tag('tag2'): {[node.data for node in tree.find_by_tag('tag2')]}")

    second = tree.find_by_tag("tag1")[1]
    tree.append_child(second, lxp.ElementNode("tag2", "appended"))
    print(f"After append: {tree}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    demo_level_1_simple_api()
    demo_level_2_configured_parser()
    demo_tree_operations()

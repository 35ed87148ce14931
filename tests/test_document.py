"""Tests for the BeautifulSoup document collaborator"""

from dialens.config import Config
from dialens.document import BeautifulSoupProvider


def test_fragment_keeps_order_at_top_of_body():
    dom = BeautifulSoupProvider().from_html("<html><body><p>leaflet</p></body></html>")
    dom.insert_first("<div id='a'></div><div id='b'></div>")
    assert dom.serialize() == (
        '<html><body><div id="a"></div><div id="b"></div><p>leaflet</p></body></html>'
    )
    assert [tag["id"] for tag in dom.query("body > div")] == ["a", "b"]


def test_html_element_is_used_when_body_is_missing():
    dom = BeautifulSoupProvider().from_html("<html><p>leaflet</p></html>")
    dom.insert_first("<section></section>")
    assert dom.serialize() == "<html><section></section><p>leaflet</p></html>"


def test_blank_html_gets_a_body():
    dom = BeautifulSoupProvider().from_html("   ")
    assert dom.insertion_point().name == "body"


def test_config_loading():
    config = Config.get_config_dict()
    assert config["SPECIFICATION"] == "1.0.0-dialens-hypo"
    assert len(Config.HYPO_CATEGORY_CODES) == 5
    assert Config.FUZZY_MATCH_THRESHOLD > 0

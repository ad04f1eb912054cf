"""Shared fixtures describing a representative SiteXML document."""

from __future__ import annotations

from textwrap import dedent

import pytest

from sitexml.model import SiteModel, build_site_model
from sitexml.xml_adapter import parse_sitexml

SAMPLE_SITEXML = dedent(
    """
    <?xml version="1.0" encoding="UTF-8"?>
    <site name="Example Site">
      <meta name="description" content="Example">Site description</meta>
      <theme id="1" name="Plain" dir="themes/plain" file="index.html" default="no">
        <content id="100" name="header">Theme header</content>
      </theme>
      <theme id="2" name="Fancy" dir="themes/fancy" file="main.html" default="Yes" ajaxbrowsing=" on "/>
      <page id="1" name="Home" alias="home" type="start">
        <meta name="keywords" content="home"/>
        <content id="10" name="intro" type="html"><p>Hello <b>world</b></p></content>
        <content id="11" name="body">Body</content>
        <page id="2" name="About" alias="about" theme="1">
          <content id="20" name="intro">About intro</content>
          <page id="3" name="Team" nonavi="yes">
            <meta name="robots" content="noindex"/>
            <content id="30" name="intro">Team intro</content>
          </page>
        </page>
        <page id="4" name="Contact" theme="99">
          <content id="40" name="form">Form</content>
        </page>
      </page>
      <page id="5" name="Blog" theme="2"/>
    </site>
    """
).strip()


@pytest.fixture
def sample_xml() -> str:
    """Return the raw SiteXML text shared by the model tests."""
    return SAMPLE_SITEXML


@pytest.fixture
def site_model(sample_xml: str) -> SiteModel:
    """Return the model built from :data:`SAMPLE_SITEXML`."""
    return build_site_model(parse_sitexml(sample_xml))

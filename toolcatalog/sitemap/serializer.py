"""
Serialization of sitemap entries to the sitemaps.org XML format.
"""

import xml.etree.ElementTree as ET
from typing import Iterable

from ..types.sitemap import SitemapEntry

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"


def render_sitemap_xml(entries: Iterable[SitemapEntry]) -> bytes:
    """
    Render entries as a ``<urlset>`` document.

    Args:
        entries: Sitemap entries, written in the given order.

    Returns:
        UTF-8 encoded XML, including the XML declaration.
    """
    urlset = ET.Element("urlset", xmlns=SITEMAP_NAMESPACE)

    for entry in entries:
        url = ET.SubElement(urlset, "url")
        ET.SubElement(url, "loc").text = entry.url
        ET.SubElement(url, "lastmod").text = entry.last_modified.isoformat()
        ET.SubElement(url, "changefreq").text = entry.change_frequency.value
        ET.SubElement(url, "priority").text = f"{entry.priority:.1f}"

    return ET.tostring(urlset, encoding="utf-8", xml_declaration=True)

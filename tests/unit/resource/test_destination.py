import pytest

from folio.config.settings import FolioSettings
from folio.resource.destination import format_url
from folio.site import Site
from tests.helpers import BUILD_TIME, make_resource


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("/blog/post/index.html", "/blog/post/"),
        ("/blog/post/index.htm", "/blog/post/"),
        ("/about.html", "/about"),
        ("/feed.xml", "/feed.xml"),
        ("/blog/post/", "/blog/post/"),
        (None, ""),
    ],
)
def test_format_url(url, expected):
    assert format_url(url) == expected


def test_posts_use_pretty_permalinks(site):
    resource = make_resource(site, "_posts/2023-5-1-hello-world.md", "---\ncategory: News Items\n---\nHi").read()

    assert resource.destination.relative_url == "/news-items/2023/05/01/hello-world/"
    assert resource.relative_url == "/news-items/2023/05/01/hello-world/"
    assert resource.absolute_url == "https://example.com/news-items/2023/05/01/hello-world/"
    assert resource.destination.output_path == site.destination / "news-items/2023/05/01/hello-world/index.html"


def test_pages_use_their_path(site):
    about = make_resource(site, "about.md", "About", collection="pages").read()
    index = make_resource(site, "index.md", "Home", collection="pages").read()
    nested = make_resource(site, "docs/install.html", "Install", collection="pages").read()

    assert about.relative_url == "/about/"
    assert index.relative_url == "/"
    assert index.destination.output_path == site.destination / "index.html"
    assert nested.relative_url == "/docs/install/"


def test_explicit_permalink_with_extension(site):
    resource = make_resource(site, "feed.md", "---\npermalink: /feed/:slug.xml\nslug: atom\n---\n", "pages").read()

    assert resource.relative_url == "/feed/atom.xml"
    assert resource.destination.output_path == site.destination / "feed/atom.xml"


def test_html_permalink_gets_clean_url_but_keeps_html_file(site):
    resource = make_resource(site, "contact.md", "---\npermalink: /contact.html\n---\n", "pages").read()

    assert resource.destination.relative_url == "/contact.html"
    assert resource.relative_url == "/contact"
    assert resource.destination.output_path == site.destination / "contact.html"


def test_output_extension_is_appended_to_extensionless_permalinks(site):
    resource = make_resource(site, "notes.md", "---\npermalink: /notes\n---\n", "pages").read()

    assert resource.destination.output_path == site.destination / "notes.html"


def test_base_path_prefixes_urls_but_not_output_paths(tmp_path):
    site = Site(FolioSettings(site_root=tmp_path, base_path="/blog/"), time=BUILD_TIME)
    resource = make_resource(site, "about.md", "About", collection="pages").read()

    assert resource.relative_url == "/blog/about/"
    assert resource.destination.output_path == site.destination / "about/index.html"


def test_collection_without_permalink_style_uses_collection_label(tmp_path):
    settings = FolioSettings(site_root=tmp_path, collections={"docs": {"output": True}})
    site = Site(settings, time=BUILD_TIME)
    resource = make_resource(site, "_docs/guide/setup.md", "Setup", collection="docs").read()

    assert resource.relative_url == "/docs/guide/setup/"

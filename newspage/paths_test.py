from pathlib import Path

from newspage.paths import SitePaths


def test_defaults_are_relative():
    paths = SitePaths()
    assert paths.news_source == Path("page/md/news.md")
    assert paths.template == Path("page/template.html")
    assert paths.stylesheet == Path("page/style.css")
    assert paths.output_page == Path("dist/index.html")
    assert paths.output_stylesheet == Path("dist/style.css")


def test_under_anchors_every_path(tmp_path):
    paths = SitePaths().under(tmp_path)
    assert paths.news_source == tmp_path / "page" / "md" / "news.md"
    assert paths.template == tmp_path / "page" / "template.html"
    assert paths.stylesheet == tmp_path / "page" / "style.css"
    assert paths.output_page == tmp_path / "dist" / "index.html"
    assert paths.output_stylesheet == tmp_path / "dist" / "style.css"
    assert SitePaths() == SitePaths()

from newspage.pipeline import BuildResult, build, main
from newspage.paths import SitePaths
from newspage.render import NewsContext, markdown_to_context, render_template

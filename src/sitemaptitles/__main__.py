from sitemaptitles.cli import app

app(prog_name="sitemap-titles")

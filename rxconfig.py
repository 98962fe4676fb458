import reflex as rx

config = rx.Config(
    app_name="intlkit",
    disable_plugins=["reflex.plugins.sitemap.SitemapPlugin"],
    show_built_with_reflex=False,
)

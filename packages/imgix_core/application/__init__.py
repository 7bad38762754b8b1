from packages.imgix_core.application.url_builder import URLBuilder, build_url

__all__ = ["URLBuilder", "build_url"]

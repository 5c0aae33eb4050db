"""Load and validate es_scraper configuration.

The configuration names the generated-assets directory holding the
specification document, the artifact filenames written next to it, and the
document anchors the extractor reads reference lists from. Every value has a
default, so a configuration file is optional; :func:`load_scraper_config`
overlays a YAML file on those defaults.

Examples
--------
>>> from es_scraper.config import ScraperConfig
>>> ScraperConfig().toc_path.name
'toc.json'
"""

from .loader import load_scraper_config
from .models import ScraperConfig, ScraperConfigError

__all__ = ["ScraperConfig", "ScraperConfigError", "load_scraper_config"]

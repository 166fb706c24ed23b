import importlib

MODULES = [
    'docscrawl.config',
    'docscrawl.container',
    'docscrawl.api.server',
    'docscrawl.services.crawl_executor',
    'docscrawl.services.html_text_extractor',
    'docscrawl.services.result_presenter',
]

def test_imports():
    for m in MODULES:
        importlib.import_module(m)

import os
import sys
import pytest

# Ensure project root is on sys.path for imports like `core.*`
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from models.resource import RequestOrigin


@pytest.fixture
def origin():
    return RequestOrigin(host="site.test", port="")


@pytest.fixture
def sample_html():
    return """
    <html>
        <head>
            <link rel="stylesheet" href="/templates/site/css/template.css?v=3">
            <link rel="icon" href="/favicon.ico">
            <link rel="preconnect" href="https://fonts.gstatic.com">
            <link rel="stylesheet" href="https://fonts.googleapis.com/css?family=Roboto">
            <script src="/media/js/app.js"></script>
            <script>window.inline = true;</script>
        </head>
        <body>
            <img src="/images/logo.png" alt="Logo">
            <img src="https://site.test/images/banner.jpg">
            <img src="//cdn.example.com/img/hero.webp">
            <script src="https://cdn.example.com/lib/jquery.min.js"></script>
        </body>
    </html>
    """

import sys
from pathlib import Path

import pytest
import requests

sys.path.insert(0, str(Path(__file__).parent.parent))


FINN_AD_HTML = """
<html>
  <body>
    <main>
      <article>
        <h1>Senior Engineer</h1>
        <p>Acme AS</p>
        <p>Vi søker en erfaren utvikler.</p>
        <div><strong>Ønskede kvalifikasjoner</strong></div>
        <p>Python</p>
        <p>Erfaring med skytjenester</p>
        <h3>Om stillingen</h3>
        <p>Fast stilling</p>
      </article>
      <section>
        <h2 class="t3">Om arbeidsgiveren</h2>
        <div class="import-decoration">Acme lager raketter.</div>
        <h2 class="t3"><div>Ferdigheter</div></h2>
        <ul>
          <li><span>Python</span></li>
          <li><span>SQL</span></li>
        </ul>
        <ul class="space-y-6">
          <li><span class="font-bold">Startdato:</span> 1. januar</li>
          <li><span class="font-bold">Sektor</span>Privat</li>
        </ul>
        <ul>
          <li><span>Sted</span>: Oslo</li>
        </ul>
      </section>
    </main>
  </body>
</html>
"""


def make_response(url, status=200, text=""):
    resp = requests.Response()
    resp.status_code = status
    resp._content = text.encode("utf-8")
    resp.encoding = "utf-8"
    resp.url = url
    return resp


class FakeSession:
    """Stands in for requests.Session; returns canned pages or raises."""

    def __init__(self, pages=None, error=None, status=200):
        self.pages = pages or {}
        self.error = error
        self.status = status
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        if self.error is not None:
            raise self.error
        return make_response(url, self.status, self.pages.get(url, ""))


@pytest.fixture
def finn_ad_html():
    return FINN_AD_HTML


@pytest.fixture
def finn_url():
    return "https://www.finn.no/job/fulltime/ad.html?finnkode=255413380"


@pytest.fixture
def finn_session(finn_url, finn_ad_html):
    return FakeSession(pages={finn_url: finn_ad_html})

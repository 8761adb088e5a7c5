from __future__ import annotations
import pytest


GITHUB_PAYLOAD = b"""
[
  {
    "id": "6a7b1c2d-0001",
    "type": "Full Time",
    "url": "https://jobs.github.com/positions/6a7b1c2d-0001",
    "created_at": "Wed Nov 20 10:31:42 UTC 2019",
    "company": "Acme",
    "company_url": "https://acme.example",
    "location": "Remote",
    "position": "Backend Engineer",
    "description": "<p>Build APIs & services</p>",
    "how_to_apply": "<a href=\\"https://acme.example/apply\\">Apply</a>"
  },
  {
    "id": "6a7b1c2d-0002",
    "created_at": "Mon Dec  2 09:00:00 UTC 2019",
    "company": "Beta",
    "company_url": null,
    "location": "",
    "title": "Data Engineer",
    "url": "https://jobs.github.com/positions/6a7b1c2d-0002",
    "description": "<ul><li>SQL</li></ul>"
  }
]
"""

STACKOVERFLOW_PAYLOAD = b"""<?xml version="1.0" encoding="utf-8"?>
<rss xmlns:a10="http://www.w3.org/2005/Atom" version="2.0">
  <channel>
    <title>Remote jobs - Stack Overflow</title>
    <link>https://stackoverflow.com/jobs</link>
    <item>
      <guid isPermaLink="false">331001</guid>
      <link>https://stackoverflow.com/jobs/331001/senior-python-developer</link>
      <a10:author><a10:name>Gamma</a10:name></a10:author>
      <title>Senior Python Developer at Gamma (allows remote)</title>
      <description>&lt;p&gt;Work on &lt;strong&gt;Django&lt;/strong&gt;&lt;/p&gt;</description>
      <pubDate>Mon, 25 Nov 2019 18:04:40 Z</pubDate>
    </item>
    <item>
      <guid isPermaLink="false">331002</guid>
      <link>https://stackoverflow.com/jobs/331002/site-reliability-engineer</link>
      <title>Site Reliability Engineer at Delta (allows remote)</title>
      <description>&lt;p&gt;On call&lt;/p&gt;</description>
      <pubDate>Tue,  3 Dec 2019 07:15:00 Z</pubDate>
    </item>
  </channel>
</rss>
"""

REMOTEOK_PAYLOAD = b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>Remote OK</title>
    <item>
      <guid>  https://remoteok.io/remote-jobs/77001  </guid>
      <pubDate>2019-11-26T09:52:04-07:00</pubDate>
      <title>  Frontend Developer  </title>
      <company>  Acme Inc.  </company>
      <link>  https://remoteok.io/remote-jobs/77001  </link>
      <description>  &lt;p&gt;React &amp;amp; TypeScript&lt;/p&gt;  </description>
    </item>
    <item>
      <guid>https://remoteok.io/remote-jobs/77002</guid>
      <pubDate>2019-11-27T08:00:00+00:00</pubDate>
      <title>DevOps Engineer</title>
      <company>Epsilon</company>
      <link>https://remoteok.io/remote-jobs/77002</link>
      <description>&lt;p&gt;Kubernetes&lt;/p&gt;</description>
    </item>
    <item>
      <guid>https://remoteok.io/remote-jobs/77003</guid>
      <pubDate>yesterday</pubDate>
      <title>QA Engineer</title>
      <company>Zeta</company>
      <link>https://remoteok.io/remote-jobs/77003</link>
      <description>Manual testing</description>
    </item>
  </channel>
</rss>
"""


@pytest.fixture
def github_payload() -> bytes:
    return GITHUB_PAYLOAD


@pytest.fixture
def stackoverflow_payload() -> bytes:
    return STACKOVERFLOW_PAYLOAD


@pytest.fixture
def remoteok_payload() -> bytes:
    return REMOTEOK_PAYLOAD

"""Smoke script for the quote API and widget page.

Sequence:
 1. Quote 1000 USDC for every supported currency.
 2. Show the two rejection paths (negative amount, unknown currency).
 3. Render the widget page from a share link with an unknown currency.
"""

import json

from fastapi.testclient import TestClient

from ripe_quote.core.config import Settings
from ripe_quote.main import create_app


def run():
    app = create_app(settings_override=Settings(_env_file=None))
    client = TestClient(app)

    results = {}
    for c in client.get("/currencies").json():
        body = client.get(
            "/quotes", params={"amount": 1000, "currency": c["code"]}
        ).json()
        results[c["code"]] = {
            "net_received": body["display"]["net_received"],
            "savings": body["display"]["savings"],
            "rate": body["display"]["rate_summary"],
        }
    neg = client.get("/quotes", params={"amount": -5, "currency": "PHP"})
    results["negative_status"] = neg.status_code
    results["negative_body"] = neg.json()
    bad = client.get("/quotes", params={"amount": 1000, "currency": "ZZZ"})
    results["unsupported_status"] = bad.status_code
    results["unsupported_body"] = bad.json()
    page = client.get("/ui", params={"amount": "5000", "currency": "ZZZ", "compare": "1"})
    results["ui_status"] = page.status_code
    print(json.dumps(results, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    run()

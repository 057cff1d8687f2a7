#!/usr/bin/env python3
"""run_demo.py - Exercise the CareerLens API against a running server.

Usage:
    python scripts/run_demo.py              # default: http://localhost:8000
    python scripts/run_demo.py --base-url http://localhost:8000 --skip-ai
"""

from __future__ import annotations

import argparse
import sys

import httpx

AI_SCENARIOS = [
    {
        "name": "Interviewer opening",
        "path": "/api/ai/interviewer/start",
        "payload": {"interviewType": "technical", "avatarType": "Mentor",
                    "jobDescription": "Backend engineer working on Python APIs"},
        "summary": lambda data: data["firstQuestion"],
    },
    {
        "name": "Interview questions",
        "path": "/api/ai/interview-questions",
        "payload": {"careerRole": "Data Engineer"},
        "summary": lambda data: f"{len(data['interviewQuestions'])} questions",
    },
    {
        "name": "Skill gap",
        "path": "/api/ai/skill-gap",
        "payload": {"userSkills": ["Python", "SQL"],
                    "targetRoleRequirements": ["Python", "Spark", "Airflow", "SQL"]},
        "summary": lambda data: f"missing: {', '.join(data['missingSkills'])}",
    },
]


def run_demo(base_url: str, skip_ai: bool) -> None:
    print("═" * 60)
    print(" CareerLens API - Demo")
    print("═" * 60)
    print(f"Target: {base_url}\n")

    try:
        resp = httpx.get(f"{base_url}/api/health", timeout=5)
        resp.raise_for_status()
        print(f"✅ Health check: {resp.json()}\n")
    except Exception as exc:
        print(f"❌ Health check failed: {exc}")
        print("   Make sure the server is running: uvicorn careerlens.main:app --reload")
        sys.exit(1)

    resp = httpx.get(f"{base_url}/api/test/web-scraper", timeout=60)
    data = resp.json()
    if data.get("success"):
        print(f"✅ Web scraper: {data['message']}")
    else:
        print(f"❌ Web scraper ({resp.status_code}): {data.get('error')}")
    print()

    if skip_ai:
        return

    completed = 0
    for scenario in AI_SCENARIOS:
        print(f"─── {scenario['name']} {'─' * (40 - len(scenario['name']))}")
        try:
            resp = httpx.post(f"{base_url}{scenario['path']}", json=scenario["payload"], timeout=60)
            data = resp.json()
            if resp.status_code != 200:
                print(f"  ❌ {resp.status_code}: {data.get('error')}")
            else:
                print(f"  → {scenario['summary'](data)[:120]}")
                completed += 1
        except Exception as exc:
            print(f"  ❌ Error: {exc}")
        print()

    print("═" * 60)
    print(f" Results: {completed}/{len(AI_SCENARIOS)} AI scenarios completed successfully")
    print("═" * 60)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run CareerLens demo requests")
    parser.add_argument("--base-url", default="http://localhost:8000", help="API base URL")
    parser.add_argument("--skip-ai", action="store_true", help="Only call the non-AI routes")
    args = parser.parse_args()
    run_demo(args.base_url, args.skip_ai)

#!/usr/bin/env python3
"""
Script de pruebas de humo contra una API en ejecución
Ejecutar desde la raíz del proyecto: python scripts/smoke_test_api.py

Variables (.env o entorno):
- SMOKE_BASE_URL   (default http://localhost:8000/api)
- SMOKE_EMAIL / SMOKE_PASSWORD
"""

import asyncio
import os
import sys

import httpx
from dotenv import load_dotenv

load_dotenv()

BASE_URL = os.getenv("SMOKE_BASE_URL", "http://localhost:8000/api")

CHECKS = [
    ("GET", "/ping", None),
    ("GET", "/me", None),
    ("GET", "/me/tables", None),
    ("GET", "/clientes", {"page": 1, "page_size": 5}),
    ("GET", "/dashboard/summary", None),
    ("GET", "/dashboard/statuses", None),
]


class ApiSmokeTester:
    def __init__(self):
        self.client = httpx.AsyncClient(base_url=BASE_URL, timeout=30.0)
        self.token = None

    async def login(self) -> bool:
        email = os.getenv("SMOKE_EMAIL")
        password = os.getenv("SMOKE_PASSWORD")
        if not email or not password:
            print("❌ Faltan SMOKE_EMAIL / SMOKE_PASSWORD")
            return False

        response = await self.client.post("/auth/login", json={"email": email, "password": password})
        body = response.json()
        if response.status_code != 200 or not body.get("ok"):
            print(f"❌ Login {email}: {response.status_code} {body.get('error')}")
            return False

        self.token = body["data"]["access_token"]
        print(f"✅ Login exitoso: {email}")
        return True

    def get_headers(self):
        return {"Authorization": f"Bearer {self.token}"} if self.token else {}

    async def run_check(self, method: str, path: str, params) -> bool:
        response = await self.client.request(method, path, params=params, headers=self.get_headers())
        try:
            body = response.json()
        except ValueError:
            print(f"❌ {method} {path}: respuesta no JSON ({response.status_code})")
            return False

        if response.status_code == 200 and body.get("ok"):
            print(f"✅ {method} {path}")
            return True

        print(f"❌ {method} {path}: {response.status_code} {body.get('error')}")
        return False

    async def run(self) -> bool:
        try:
            if not await self.login():
                return False
            results = [await self.run_check(*check) for check in CHECKS]
        finally:
            await self.client.aclose()

        passed = sum(results)
        print(f"\n📊 {passed}/{len(results)} verificaciones OK")
        return passed == len(results)


if __name__ == "__main__":
    ok = asyncio.run(ApiSmokeTester().run())
    sys.exit(0 if ok else 1)

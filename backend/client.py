# backend/client.py
import requests

API = "http://localhost:8000/api/v1"  # adjust if running on docker-compose

def test_health():
    r = requests.get(f"{API}/health")
    print("Health:", r.status_code, r.json())

def test_examples():
    r = requests.get(f"{API}/examples")
    print("Examples:", r.status_code, r.json())

def test_samples():
    r = requests.get(f"{API}/samples")
    print("Samples:", r.status_code, r.json())
    r = requests.get(f"{API}/samples/retentionByRegion")
    print("Sample rows:", r.status_code, r.json())

def test_query():
    q = {"question": "Show me customer retention rates by region"}
    r = requests.post(f"{API}/query", json=q)
    body = r.json()
    print("Query:", r.status_code, body.get("chartType"), body.get("data"))

def test_blank_query():
    r = requests.post(f"{API}/query", json={"question": "   "})
    print("Blank query:", r.status_code, r.json())

if __name__ == "__main__":
    print("--- Testing FastAPI backend ---")
    test_health()
    test_examples()
    test_samples()
    test_query()
    test_blank_query()

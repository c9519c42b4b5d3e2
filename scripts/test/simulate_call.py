# scripts/test/simulate_call.py
"""Dial a plate fragment against a running backend and print the ARS decision."""

import argparse
import requests

BACKEND_URL = "http://localhost:4000/api"


def simulate_call(base_url, caller, digits):
    resp = requests.post(f"{base_url}/simulate-call",
                         json={"caller_number": caller, "input_digits": digits}, timeout=10)
    if resp.status_code != 200:
        print(f"HTTP {resp.status_code}: {resp.json().get('detail')}")
        return
    body = resp.json()
    decision, log = body["response"], body["log"]
    print(f"{digits} → {decision['action']} ({log['call_status']})")
    print(f"   message: {decision['audio_message']}")
    if decision.get("target_number"):
        print(f"   bridge:  {decision['target_number']}")
    print(f"   log:     {log['id']} caller={log['caller_phone_hash']} sms={log['sms_sent']}")


def show_logs(base_url, limit):
    resp = requests.get(f"{base_url}/logs", params={"limit": limit}, timeout=10)
    for log in resp.json():
        print(f"{log['timestamp']}  {log['vehicle_plate']}  {log['call_status']:<10} {log['caller_phone_hash']}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Simulate ARS calls for testing")
    parser.add_argument("--url", default=BACKEND_URL)
    parser.add_argument("--caller", default="010-9876-5432")
    parser.add_argument("--digits", default="1234")
    parser.add_argument("--logs", type=int, metavar="N", help="print the last N call logs instead")
    args = parser.parse_args()

    if args.logs:
        show_logs(args.url, args.logs)
    else:
        simulate_call(args.url, args.caller, args.digits)

#!/usr/bin/env python3
"""
Create an ActiveCampaign contact and apply the configured tag.

Usage:
  python scripts/subscribe_lead.py <EMAIL> <PHONE>

Env vars: ACTIVE_CAMPAIGN_API_URL, ACTIVE_CAMPAIGN_API_TOKEN, ACTIVE_CAMPAIGN_TAG_ID
"""
import argparse

from lead_capture.integrations.activecampaign_client import ActiveCampaignClient


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("email")
    parser.add_argument("phone")
    args = parser.parse_args()

    client = ActiveCampaignClient()
    contact_id = client.subscribe_sync(args.email, args.phone)
    print(f"Created and tagged contact {contact_id} (tag={client.tag_id})")

if __name__ == "__main__":
    main()

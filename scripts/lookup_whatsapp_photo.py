#!/usr/bin/env python3
import argparse

from lead_capture.integrations.whatsapp_photo_client import WhatsAppPhotoClient, normalize_phone


def main():
    parser = argparse.ArgumentParser(description="Look up a WhatsApp profile photo via RapidAPI")
    parser.add_argument("phone")
    args = parser.parse_args()

    client = WhatsAppPhotoClient()
    number = normalize_phone(args.phone)
    print("Normalized number:", number)
    url = client.get_profile_picture_url_sync(number)
    print("Photo URL:", url or "no photo (private or not found)")

if __name__ == "__main__":
    main()

import argparse
import os
from typing import Any

import requests

LINGOBRIDGE_URL = os.getenv("LINGOBRIDGE_URL", "http://127.0.0.1:8000")


def list_languages() -> dict[str, Any]:
    response = requests.get(f"{LINGOBRIDGE_URL}/api/v1/languages", timeout=10)
    response.raise_for_status()
    return response.json()


def translate(text: str, output_language: str, input_language: str = "auto") -> dict[str, Any]:
    response = requests.post(
        f"{LINGOBRIDGE_URL}/api/v1/translate",
        json={"input_language": input_language, "output_language": output_language, "text": text},
        timeout=60,
    )
    response.raise_for_status()
    return response.json()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Translate text through a running LingoBridge server.")
    parser.add_argument("text", nargs="?", help="Text to translate (3-50 characters).")
    parser.add_argument("-f", "--from", dest="input_language", default="auto", help="Source language id.")
    parser.add_argument("-t", "--to", dest="output_language", default="en", help="Target language id.")
    parser.add_argument("--list", action="store_true", help="Print the supported languages and exit.")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list:
        languages = list_languages()
        print("Input languages:")
        for language in languages["input_languages"]:
            print(f"  {language['id']:<5} {language['name']}")
        print("Output languages:")
        for language in languages["output_languages"]:
            print(f"  {language['id']:<5} {language['name']}")
        return 0

    if not args.text:
        parser.error("text is required unless --list is given")

    result = translate(args.text, args.output_language, args.input_language)
    print(result["output_text"])
    return 0 if result["success"] else 1


if __name__ == "__main__":
    raise SystemExit(main())

"""Console front end: exchange rate, weather and translation for your trip. Loads .env from project root."""

import argparse
import logging
import os
import sys

from dotenv import load_dotenv

load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), ".env"))

from baluchon import Baluchon, FetchError, Settings
from baluchon.preferences import DESTINATION_CITY, DESTINATION_CURRENCY, HOME_CITY


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Le Baluchon: rates, weather and translation for travellers")
    parser.add_argument("--home-city", help="Home city, e.g. Paris")
    parser.add_argument("--destination-city", help="Destination city, e.g. New York")
    parser.add_argument("--currency", help="Destination currency code, e.g. USD")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("weather", help="Current weather at home and at destination")
    rate = sub.add_parser("rate", help="Exchange rate to the destination currency")
    rate.add_argument("--amount", type=float, help="Amount to convert")
    translate = sub.add_parser("translate", help="Translate from home to destination language")
    translate.add_argument("text", nargs="+", help="Text to translate")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = Settings.from_env()
    except ValueError as e:
        print(f"❌ Configuration: {e}", file=sys.stderr)
        return 2
    for name in settings.missing_keys():
        print(f"⚠️ {name} is not set in .env or environment.", file=sys.stderr)

    app = Baluchon(settings)
    try:
        if args.home_city:
            app.preferences.set(HOME_CITY, args.home_city)
        if args.destination_city:
            app.preferences.set(DESTINATION_CITY, args.destination_city)
        if args.currency:
            app.preferences.set(DESTINATION_CURRENCY, args.currency)

        if args.command == "weather":
            app.print_weather()
        elif args.command == "rate":
            app.print_exchange(*app.exchange(args.amount))
        elif args.command == "translate":
            app.print_translation(app.translate(" ".join(args.text)))
    except (FetchError, ValueError) as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

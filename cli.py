import argparse
import json
import os
import uuid as _uuid

from bot_handlers import build_query_response, build_response
from config.settings import get_settings
from services.dead_or_alive import DeadOrAlive
from services.override_table import get_override_table
from utils.logging_setup import init_logging


def _search_term(args) -> str:
	return " ".join(args.terms).strip()


def cmd_lookup(args):
	service = DeadOrAlive()
	print(build_response(_search_term(args), service))


def cmd_suggest(args):
	service = DeadOrAlive()
	articles = build_query_response(_search_term(args), service)
	print(json.dumps(articles, indent=2, ensure_ascii=False))


def cmd_overrides(args):
	table = get_override_table()
	out = []
	for entry in table.entries:
		out.append({
			"aliases": list(entry.aliases),
			"name": entry.person.name,
			"custom_message": entry.person.custom_message,
		})
	print(json.dumps(out, indent=2, ensure_ascii=False))


def main():
	settings = get_settings()
	if not os.getenv("RUN_ID"):
		os.environ["RUN_ID"] = _uuid.uuid4().hex
	parser = argparse.ArgumentParser(description="Dead or Alive lookup CLI")
	parser.add_argument("--log-level", default=settings.log_level, help="Log level (default from settings)")
	sub = parser.add_subparsers(dest="cmd", required=True)

	p_look = sub.add_parser("lookup", help="Answer 'dead or alive?' for a name")
	p_look.add_argument("terms", nargs="+", help="Name to look up")
	p_look.set_defaults(func=cmd_lookup)

	p_sug = sub.add_parser("suggest", help="Print inline suggestions for a name as JSON")
	p_sug.add_argument("terms", nargs="+", help="Name to look up")
	p_sug.set_defaults(func=cmd_suggest)

	p_ovr = sub.add_parser("overrides", help="List the configured override aliases")
	p_ovr.set_defaults(func=cmd_overrides)

	args = parser.parse_args()
	init_logging(args.log_level)
	args.func(args)


if __name__ == "__main__":
	main()

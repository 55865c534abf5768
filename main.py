#!/usr/bin/env python3
"""
Entry point for the PhotoFlo review tool.
"""

import argparse
import datetime
import logging
import sys
from datetime import timezone

from photoflo.config import API_KEY_ENV, SPREADSHEET_ID_ENV
from photoflo.models import ConfigError, FilterStatus, PhotoFloError, PhotoRecord, SortOption, ViewMode
from photoflo.render import render_details, render_photos
from photoflo.review import PhotoReview
from photoflo.sheet_mapper import parse_tags


def build_client(demo: bool):
    if demo:
        from photoflo.mock_data import MockSheetsClient
        return MockSheetsClient()

    from photoflo.sheets_client import SheetsSyncClient
    return SheetsSyncClient()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="PhotoFlo - review photos listed in a Google Sheet")
    parser.add_argument("--demo", action="store_true", help="Use random mock photos instead of the sheet")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    sub = parser.add_subparsers(dest="command", required=True)

    list_cmd = sub.add_parser("list", help="List photos")
    list_cmd.add_argument("--search", default="", help="Match title, photographer or tag")
    list_cmd.add_argument("--filter", choices=[f.value for f in FilterStatus], help="Approval filter (saved)")
    list_cmd.add_argument("--sort", choices=[s.value for s in SortOption], help="Sort order (saved)")
    list_cmd.add_argument("--view", choices=[v.value for v in ViewMode], help="View mode (saved)")

    show_cmd = sub.add_parser("show", help="Show one photo's details")
    show_cmd.add_argument("photo_id")

    for name, help_text in (("approve", "Approve photos"), ("reject", "Mark photos as pending")):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("photo_ids", nargs="+", metavar="ID")

    add_cmd = sub.add_parser("add", help="Append a new photo row")
    add_cmd.add_argument("--url", required=True, help="Image link")
    add_cmd.add_argument("--photographer", default="")
    add_cmd.add_argument("--tags", default="", help="Comma-separated tags")
    add_cmd.add_argument("--source", default="")
    add_cmd.add_argument("--page-link", default="")
    add_cmd.add_argument("--orientation", default="")
    add_cmd.add_argument("--approved", action="store_true")

    sub.add_parser("theme", help="Toggle light/dark theme")
    return parser


def cmd_list(review: PhotoReview, args):
    if args.filter:
        review.set_filter_status(FilterStatus(args.filter))
    if args.sort:
        review.set_sort_option(SortOption(args.sort))
    if args.view:
        review.set_view_mode(ViewMode(args.view))
    review.set_search_term(args.search)

    review.refresh()
    photos = review.visible_photos()
    print(render_photos(photos, review.state.prefs.view_mode, review.state.selected_ids))
    print(f"\n{len(photos)} of {len(review.state.photos)} photos shown.")


def cmd_show(review: PhotoReview, args) -> int:
    review.refresh()
    photo = review.select_photo(args.photo_id)
    if photo is None:
        print(f"Photo '{args.photo_id}' not found.")
        return 1
    print(render_details(photo))
    return 0


def cmd_set_approval(review: PhotoReview, photo_ids, approved: bool):
    verb = "Approved" if approved else "Rejected"
    photo_ids = list(dict.fromkeys(photo_ids))
    if len(photo_ids) == 1:
        review.toggle_approval(photo_ids[0], approved)
    else:
        review.clear_selection()
        review.state.selected_ids.update(photo_ids)
        if approved:
            review.bulk_approve()
        else:
            review.bulk_reject()
    print(f"{verb} {len(photo_ids)} photo(s).")


def cmd_add(review: PhotoReview, args):
    photo = PhotoRecord(
        id="",
        image_url=args.url,
        photographer=args.photographer,
        tags=parse_tags(args.tags),
        source=args.source,
        description=args.source,
        page_link=args.page_link,
        orientation=args.orientation,
        approved=args.approved,
        upload_date=datetime.datetime.now(timezone.utc).isoformat(),
    )
    new_photo = review.add_photo(photo)
    print(f"Added photo {new_photo.id}")


def print_config_help(error: ConfigError):
    print(f"Error: {error}")
    print("Make sure you have:")
    print(f"  - Set up your Google Sheets API key ({API_KEY_ENV})")
    print(f"  - Configured the correct spreadsheet ID ({SPREADSHEET_ID_ENV})")
    print("  - Made your spreadsheet publicly readable")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        review = PhotoReview(build_client(args.demo))

        if args.command == "list":
            cmd_list(review, args)
        elif args.command == "show":
            return cmd_show(review, args)
        elif args.command == "approve":
            cmd_set_approval(review, args.photo_ids, True)
        elif args.command == "reject":
            cmd_set_approval(review, args.photo_ids, False)
        elif args.command == "add":
            cmd_add(review, args)
        elif args.command == "theme":
            print(f"Theme is now {review.toggle_theme().value}.")
    except ConfigError as e:
        print_config_help(e)
        return 1
    except PhotoFloError as e:
        print(f"Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

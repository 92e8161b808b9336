import asyncio
import argparse
import json
import logging

import httpx

from config.settings_loader import load_settings
from core.context import RequestContext
from core.engine import LinkHeaderEngine

def main():
    parser = argparse.ArgumentParser(description="Compute the HTTP 'Link' preload/preconnect header for a page")
    parser.add_argument("url", help="Page URL (e.g., https://example.com/); also defines the origin")
    parser.add_argument("--file", type=str, help="Read the HTML from this file instead of fetching the URL")
    parser.add_argument("--limit", action="store_true", default=None, help="Trim the header to fit the maximum header size")
    parser.add_argument("--max-header-size", type=int, help="Maximum size of the header line in bytes (default: 8192)")
    parser.add_argument("--settings", type=str, help="Path to a YAML settings file (default: config/settings.yaml)")
    parser.add_argument("--headers-file", type=str, help="Path to JSON file containing additional HTTP headers (e.g., User-Agent, Cookie, Authorization)")
    parser.add_argument("--with-name", action="store_true", help="Print the complete header line instead of only its value")
    parser.add_argument("--log-level", type=str, default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging verbosity level (default: WARNING)")
    args = parser.parse_args()
    
    # Configure logging
    logging.basicConfig(
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        level=getattr(logging, args.log_level),
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    logger = logging.getLogger(__name__)

    try:
        settings = load_settings(args.settings, header_limit=args.limit, max_header_size=args.max_header_size)
    except (ValueError, OSError) as e:
        logger.error(f"Invalid settings: {e}")
        return
    
    # Load custom headers from JSON file if provided
    custom_headers = {}
    if args.headers_file:
        try:
            with open(args.headers_file, 'r') as f:
                custom_headers = json.load(f)
                if not isinstance(custom_headers, dict):
                    logger.error("Headers file must contain a JSON object (dictionary)")
                    return
                logger.info(f"Loaded {len(custom_headers)} custom headers from {args.headers_file}")
        except FileNotFoundError:
            logger.error(f"Headers file not found: {args.headers_file}")
            return
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in headers file: {e}")
            return

    engine = LinkHeaderEngine(settings=settings, custom_headers=custom_headers)

    if args.file:
        try:
            with open(args.file, 'r', encoding='utf-8', errors='replace') as f:
                html = f.read()
        except OSError as e:
            logger.error(f"Could not read {args.file}: {e}")
            return
        logger.info(f"Read {len(html)} chars from {args.file}")
        try:
            context = RequestContext.from_url(args.url)
        except ValueError as e:
            logger.error(f"Invalid URL {args.url}: {e}")
            return
        value = engine.build(context, html)
    else:
        logger.info(f"Fetching {args.url}...")
        try:
            value = asyncio.run(engine.build_for_url(args.url))
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            logger.error(f"Could not fetch {args.url}: {e}")
            return

    if not value:
        logger.info("No resources to announce")
    print(f"Link: {value}" if args.with_name else value)

if __name__ == "__main__":
    main()

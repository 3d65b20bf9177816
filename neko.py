import argparse
import json
import os
import sys

from core.config import CONFIG_FILE, load_config, write_default_config
from core.errors import ParseError
from spellbook import read_spell, set_verbose, tokenize_spell

STORY_STYLES = ("brief", "normal", "full")

RELEASE_NOTES = [
    "- Initial release with minimal parser",
    "- Support for 'say' command with string literals",
    "- CLI interface with flexible command system",
    "- Basic error handling and script execution",
]

BANNER = [
    "╭─────────────────────────╮",
    "│                         │",
    "│ ▖ ▖  ▌          ▘       │",
    "│ ▛▖▌█▌▙▘▛▌▛▌▛▌▛▛▌▌▛▘▛▌▛▌ │",
    "│ ▌▝▌▙▖▛▖▙▌▌▌▙▌▌▌▌▌▙▖▙▌▌▌ │",
    "│                         │",
    "╰─────────────────── CLI ─╯",
]

HELLO_SPELL = "~ My first spell\nsay 'Hello, World!'.\n"


def log(message):
    """Log informational messages to stderr."""
    print(f"\033[92m\033[1mINFO:\033[0m {message}", file=sys.stderr)

def paint(text, code, enabled=True):
    """Wrap text in an ANSI style when color is enabled."""
    if not enabled:
        return text
    return f"\033[{code}m{text}\033[0m"

def read_source(filename):
    """Return (filepath, source) for a file name or '-' (stdin)."""
    if filename is None or filename == "-":
        return "<stdin>", sys.stdin.read()
    if not os.path.exists(filename):
        print(f"Error: File '{filename}' not found.", file=sys.stderr)
        sys.exit(1)
    with open(filename, 'r', encoding='utf-8') as f:
        return filename, f.read()

def story_style(words, default="normal"):
    """Find 'with style <value>' among the story arguments."""
    for i in range(len(words) - 2):
        if words[i] == "with" and words[i + 1] == "style":
            return words[i + 2]
    return default

def render_story(style, version):
    if style == "brief":
        return [f"v{version}"]
    if style == "normal":
        return [f"The nekonomicon's is now at version {version}."]
    return [
        f"I will tell you a story about The Nekonomicon who is now {version}.",
        "",
        "Back in my old days...",
        "+ V0.1.0:",
        "",
        *RELEASE_NOTES,
        "",
        "A magical scripting language for automation and clarity.",
    ]

def render_help(version, color=True):
    magenta = lambda s: paint(s, "95", color)
    header = lambda s: paint(s, "93;1", color)
    command = lambda s: paint(s, "92", color)
    neko = paint("neko", "97", color)

    lines = [magenta(line) for line in BANNER]
    lines += [
        "",
        header("USAGE:"),
        f"  {neko} <script.spell>",
        f"  {neko} [command] [options]",
        "",
        header("COMMANDS:"),
        f"  {command('story')}    Display version information",
        f"  {command('help')}     Show this help message",
        f"  {command('parse')}    Print the syntax tree of a spell as JSON",
        f"  {command('tokens')}   Print the tokens of each spell line",
        f"  {command('check')}    Verify that a spell parses",
        f"  {command('init')}     Create hello_world.spell and {CONFIG_FILE}",
        "",
        header("EXAMPLES:"),
        f"  {neko} hello_world.spell",
        f"  {neko} story with style full",
        "",
        paint(f"Version: {version}", "2", color),
    ]
    return lines

def cmd_story(args, config):
    style = story_style(args.words, default=config.story_style)
    if style not in STORY_STYLES:
        print(f"Unknown style '{style}'. Supported styles: {', '.join(STORY_STYLES)}", file=sys.stderr)
        sys.exit(1)
    for line in render_story(style, config.version):
        print(line)

def cmd_help(args, config):
    for line in render_help(config.version, color=config.color):
        print(line)

def cmd_parse(args, config):
    filepath, source_code = read_source(args.filename)
    try:
        commands = read_spell(filepath, source_code)
    except ParseError as e:
        print(f"Error: Parsing Failed:\n{e}", file=sys.stderr)
        sys.exit(1)
    tree = [[node.model_dump() for node in c.to_nodes()] for c in commands]
    print(json.dumps(tree, indent=2))

def cmd_tokens(args, config):
    filepath, source_code = read_source(args.filename)
    for line_number, tokens in tokenize_spell(filepath, source_code):
        for token in tokens:
            print(f"{line_number}: {token}")

def cmd_check(args, config):
    filepath, source_code = read_source(args.filename)
    try:
        commands = read_spell(filepath, source_code)
    except ParseError as e:
        print(f"Error: Check Failed:\n{e}", file=sys.stderr)
        sys.exit(1)
    log(f"✨ {filepath}: OK ({len(commands)} commands)")

def cmd_init(args, config):
    log("Initializing spellbook...")
    with open("hello_world.spell", "w") as f:
        f.write(HELLO_SPELL)
    write_default_config(CONFIG_FILE)
    log(f"Created hello_world.spell and {CONFIG_FILE}")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Nekonomicon CLI")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose output (sent to stderr)")
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("story", help="Display version information").add_argument("words", nargs="*", help="e.g. 'with style full'")
    subparsers.add_parser("help", help="Show usage information")
    subparsers.add_parser("parse", help="Print the syntax tree as JSON").add_argument("filename", nargs="?", default="-", help="Spell to parse (default: read from stdin)")
    subparsers.add_parser("tokens", help="Print lexer tokens").add_argument("filename", nargs="?", default="-", help="Spell to tokenize (default: read from stdin)")
    subparsers.add_parser("check", help="Verify a spell parses").add_argument("filename", nargs="?", default="-", help="Spell to check (default: read from stdin)")
    subparsers.add_parser("init", help="Create a starter spell and config")

    # 'neko hello.spell' is shorthand for 'neko check hello.spell'
    argv = list(sys.argv[1:] if argv is None else argv)
    if argv and argv[0].endswith(".spell"):
        argv.insert(0, "check")

    args = parser.parse_args(argv)
    set_verbose(args.verbose)
    config = load_config()

    if args.command == "story": cmd_story(args, config)
    elif args.command == "help": cmd_help(args, config)
    elif args.command == "parse": cmd_parse(args, config)
    elif args.command == "tokens": cmd_tokens(args, config)
    elif args.command == "check": cmd_check(args, config)
    elif args.command == "init": cmd_init(args, config)
    else: parser.print_help()

if __name__ == "__main__":
    main()

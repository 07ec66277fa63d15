"""Terminal lookup shell for a word list."""

from __future__ import annotations

from seqtrie.wordlist import WordList

HELP = "\n".join([
    "Commands:",
    "  add WORD          -- insert a word",
    "  del WORD          -- remove a word",
    "  has WORD          -- membership test",
    "  pre PREFIX [N]    -- words starting with PREFIX (at most N)",
    "  count             -- number of words and trie nodes",
    "  help              -- this text",
    "  quit              -- leave",
])


def format_matches(prefix: str, matches: list[str]) -> str:
    if not matches:
        return f"  No words start with '{prefix}'."
    lines = [f"  {len(matches)} match(es) for '{prefix}':"]
    lines.extend(f"    {word}" for word in matches)
    return "\n".join(lines)


def handle_command(wordlist: WordList, line: str) -> str | None:
    """Run one shell command; returns the text to print, or None to quit."""
    parts = line.split()
    if not parts:
        return ""

    cmd, args = parts[0].lower(), parts[1:]
    if cmd in ("quit", "done", "exit"):
        return None
    if cmd == "help":
        return HELP
    if cmd == "count":
        return f"  {len(wordlist):,} words, {wordlist.trie.node_count:,} nodes"

    if cmd == "add" and len(args) == 1:
        if wordlist.add(args[0]):
            return f"  Added '{args[0]}'"
        return f"  Rejected '{args[0]}' (length or whitespace)"
    if cmd == "del" and len(args) == 1:
        if args[0] not in wordlist:
            return f"  '{args[0]}' is not in the list"
        wordlist.discard(args[0])
        return f"  Removed '{args[0]}'"
    if cmd == "has" and len(args) == 1:
        return "  yes" if args[0] in wordlist else "  no"
    if cmd == "pre" and len(args) in (1, 2):
        limit = None
        if len(args) == 2:
            try:
                limit = int(args[1])
            except ValueError:
                return "  Invalid.  pre PREFIX [N]   (N is a number)"
            if limit < 0:
                return "  Invalid.  N must not be negative"
        return format_matches(args[0], wordlist.complete(args[0], limit))

    return "  Unknown command.  Type 'help' for the list."


def run_cli(wordlist: WordList) -> None:
    """Interactive loop until quit, EOF or Ctrl-C."""
    print("\n" + "=" * 60)
    print("  TRIE LOOKUP -- Interactive Shell")
    print("=" * 60)
    print()
    print(HELP)
    print()

    while True:
        try:
            inp = input("  trie> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        out = handle_command(wordlist, inp)
        if out is None:
            break
        if out:
            print(out)

"""
Prompt Optimizer - Telegram Bot
Scores prompts on clarity, specificity, context and structure, then
rewrites them into stronger versions.

Features:
- /analyze: Score a prompt with improvement suggestions
- /enhance: Rewrite a prompt based on its scores
- /examples: Before/after prompt examples
- Plain text: full optimize round trip (score, rewrite, re-score)
- Input validation + Redis rate limiting
"""

import random
import time

import requests

from prompt_optimizer.config import config
from prompt_optimizer.analyzer import analyze
from prompt_optimizer.enhancer import enhance
from prompt_optimizer.examples import format_examples
from prompt_optimizer.lexicon import DEFAULT_LEXICON, load_lexicon
from prompt_optimizer.pipeline import optimize_prompt
from prompt_optimizer.rate_limit import RateLimiter
from prompt_optimizer.validator import validate_prompt

API_URL = f"https://api.telegram.org/bot{config.BOT_TOKEN}"
limiter = RateLimiter(config.REDIS_URL, config.RATE_LIMIT_MAX, config.RATE_LIMIT_WINDOW)
lexicon = load_lexicon(config.LEXICON_PATH) if config.LEXICON_PATH else DEFAULT_LEXICON


def tg_request(method: str, params: dict = None, json_data: dict = None):
    """Make Telegram API request."""
    try:
        if json_data:
            r = requests.post(f"{API_URL}/{method}", json=json_data, timeout=35)
        else:
            r = requests.get(f"{API_URL}/{method}", params=params, timeout=35)
        return r.json()
    except (requests.exceptions.RequestException, ValueError) as e:
        print(f"[api error] {method}: {e}")
        return None


def tg_send(chat_id: int, text: str, reply_to: int = None, parse_mode: str = "Markdown"):
    """Send message with fallback to plain text."""
    params = {
        "chat_id": chat_id,
        "text": text,
        "disable_web_page_preview": True,
    }
    if reply_to:
        params["reply_to_message_id"] = reply_to
    if parse_mode:
        params["parse_mode"] = parse_mode
    result = tg_request("sendMessage", params)
    if not result or not result.get("ok"):
        params.pop("parse_mode", None)
        result = tg_request("sendMessage", params)
    return result


def send_long(chat_id: int, text: str, header: str = "", reply_to: int = None):
    """Send long text in chunks."""
    full = header + text if header else text
    if len(full) <= 4000:
        tg_send(chat_id, full, reply_to)
        return
    chunks = [full[i:i + 4000] for i in range(0, len(full), 4000)]
    for i, chunk in enumerate(chunks):
        tg_send(chat_id, chunk, reply_to if i == 0 else None)
        time.sleep(0.3)


def _rng():
    return random.Random(config.ENHANCE_SEED) if config.ENHANCE_SEED is not None else None


def _admit(chat_id: int, msg_id: int, prompt: str) -> bool:
    """Validate and rate limit a request; reply with the reason if rejected."""
    result = validate_prompt(prompt, config.MAX_PROMPT_LENGTH)
    if not result.passed:
        tg_send(chat_id, f"⚠️ {result.first_error}", msg_id, parse_mode=None)
        return False
    if not limiter.allow(chat_id):
        tg_send(chat_id, "⚠️ Too many requests, please try again later.", msg_id, parse_mode=None)
        return False
    return True


def cmd_analyze(chat_id: int, msg_id: int, prompt: str):
    """Score a prompt."""
    if not _admit(chat_id, msg_id, prompt):
        return
    report = analyze(prompt, lexicon)
    send_long(chat_id, report.summary(), reply_to=msg_id)
    print(f"[analyze] {chat_id} | score {report.total_score} | {len(prompt)} chars")


def cmd_enhance(chat_id: int, msg_id: int, prompt: str):
    """Rewrite a prompt using its own scores."""
    if not _admit(chat_id, msg_id, prompt):
        return
    report = analyze(prompt, lexicon)
    result = enhance(prompt, report.breakdown, rng=_rng(), lexicon=lexicon)
    send_long(chat_id, result.summary(), reply_to=msg_id)
    print(f"[enhance] {chat_id} | {result.category.value} | {len(result.improvements)} changes")


def cmd_optimize(chat_id: int, msg_id: int, prompt: str):
    """Score, rewrite and re-score a prompt."""
    if not _admit(chat_id, msg_id, prompt):
        return
    result = optimize_prompt(prompt, rng=_rng(), lexicon=lexicon)
    send_long(chat_id, result.summary(), reply_to=msg_id)
    print(
        f"[optimize] {chat_id} | {result.before.total_score} -> "
        f"{result.after.total_score} | {result.enhancement.category.value}"
    )


def process_message(chat_id: int, msg_id: int, text: str):
    """Route messages to handlers."""

    if text == "/start":
        tg_send(chat_id,
            "✨ *Prompt Optimizer*\n\n"
            "Scores your prompts on clarity, specificity, context and structure "
            "(25 points each), then rewrites them.\n\n"
            "📊 /analyze `prompt` — score a prompt\n"
            "🔧 /enhance `prompt` — rewrite a prompt\n"
            "📝 /examples — before/after examples\n"
            "📖 /help — usage\n\n"
            "Or just send a prompt to score and improve it in one go.",
            msg_id)
        return

    if text == "/help":
        tg_send(chat_id,
            "📖 *Usage*\n\n"
            "*Score:* `/analyze Write a story about dragons`\n"
            "*Rewrite:* `/enhance Explain AI`\n"
            "*Both:* send the prompt as a plain message\n\n"
            f"Prompts up to {config.MAX_PROMPT_LENGTH} characters.",
            msg_id)
        return

    if text == "/examples":
        send_long(chat_id, format_examples(), "📝 *Examples*\n\n", msg_id)
        return

    for command, handler in (("/analyze", cmd_analyze), ("/enhance", cmd_enhance)):
        if text == command or text.startswith(command + " "):
            prompt = text[len(command):].strip()
            if not prompt:
                tg_send(chat_id, f"Please add a prompt, e.g. `{command} Explain AI`", msg_id)
                return
            handler(chat_id, msg_id, prompt)
            return

    if text.startswith("/"):
        tg_send(chat_id, "Unknown command. Send /start to see all features.", msg_id)
        return

    cmd_optimize(chat_id, msg_id, text)


def main():
    config.validate()

    print(f"\n{'=' * 50}")
    print("  Prompt Optimizer Bot")
    print(f"  Lexicon: v{lexicon.version}")
    print(f"  Max prompt: {config.MAX_PROMPT_LENGTH} chars")
    print(f"  Rate limit: {config.RATE_LIMIT_MAX}/{config.RATE_LIMIT_WINDOW}s")
    print(f"  Redis: {'✅' if limiter.redis else '❌ (in-memory fallback)'}")
    print(f"{'=' * 50}")

    me = tg_request("getMe")
    if me and me.get("ok"):
        print(f"\n✅ @{me['result']['username']} online!")
    else:
        print("\n❌ Cannot connect to Telegram!")
        return

    offset = None
    while True:
        try:
            params = {"timeout": 30}
            if offset:
                params["offset"] = offset
            result = tg_request("getUpdates", params)
            if not result or not result.get("ok"):
                time.sleep(5)
                continue

            for update in result.get("result", []):
                offset = update["update_id"] + 1
                msg = update.get("message")
                if not msg:
                    continue
                chat_id = msg["chat"]["id"]
                msg_id = msg.get("message_id")
                text = (msg.get("text") or "").strip()
                if text:
                    process_message(chat_id, msg_id, text)

        except KeyboardInterrupt:
            print("\n\n👋 Stopped!")
            break
        except Exception as e:
            print(f"[error] {e}")
            time.sleep(5)


if __name__ == "__main__":
    main()

"""HTML rendering for the assessment page.

All text coming from the candidate or the database goes through ``escape``.
"""

from __future__ import annotations

from html import escape
from typing import List

from assessment.core.config import get_settings
from assessment.features.challenges.presentation import category_badge, difficulty_badge
from assessment.features.challenges.schemas import ChallengeSchema

from . import state as st

# ─── Templates ────────────────────────────────────────────────────────────────

PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8"/>
  <meta name="viewport" content="width=device-width, initial-scale=1.0"/>
  <title>{title}</title>
  <script src="https://cdn.tailwindcss.com"></script>
</head>
<body class="min-h-screen bg-gray-950 text-white">
  <header class="border-b border-gray-800 bg-gray-900/50">
    <div class="max-w-6xl mx-auto px-4 py-6">
      <h1 class="text-3xl font-bold text-green-400">{title}</h1>
      <p class="text-gray-400 mt-2">Supabase &amp; Full-Stack Developer Evaluation</p>
    </div>
  </header>
  <main class="max-w-6xl mx-auto px-4 py-8">
{body}
  </main>
  <footer class="border-t border-gray-800 mt-12 py-6 text-center text-gray-500">
    <p>{title} Platform</p>
    <p class="text-sm mt-1">Powered by Supabase + FastAPI</p>
  </footer>
{script}
</body>
</html>
"""

LOADING_PAGE = """<!DOCTYPE html>
<html lang="en">
<head><meta charset="UTF-8"/><title>{title}</title></head>
<body class="min-h-screen bg-gray-950 flex items-center justify-center">
  <div class="text-white text-xl">Loading...</div>
</body>
</html>
"""

REGISTER_FORM = """    <div class="bg-gray-900 rounded-xl p-8 border border-gray-800 max-w-md mx-auto">
      <h2 class="text-xl font-semibold mb-6">Register to Begin</h2>
{error}      <form method="post" action="/register" class="space-y-4" data-busy-label="Registering...">
        <div>
          <label class="block text-sm text-gray-400 mb-1" for="name">Full Name</label>
          <input id="name" name="name" type="text" value="{name}" placeholder="John Doe" data-required
                 class="w-full bg-gray-800 border border-gray-700 rounded-lg px-4 py-2"/>
        </div>
        <div>
          <label class="block text-sm text-gray-400 mb-1" for="email">Email</label>
          <input id="email" name="email" type="email" value="{email}" placeholder="john@example.com" data-required
                 class="w-full bg-gray-800 border border-gray-700 rounded-lg px-4 py-2"/>
        </div>
        <button type="submit" id="start-btn"{disabled}
                class="w-full bg-green-600 hover:bg-green-700 disabled:bg-gray-700 rounded-lg py-3 font-semibold">{label}</button>
      </form>
    </div>"""

WELCOME = """    <div class="bg-gray-900 rounded-xl p-6 border border-gray-800 mb-8">
      <div class="flex justify-between items-center">
        <div>
          <p class="text-gray-400">Welcome back,</p>
          <p class="text-xl font-semibold">{name}</p>
        </div>
        <div class="text-right">
          <p class="text-gray-400">Completed</p>
          <p class="text-2xl font-bold text-green-400" id="progress">{completed} / {total}</p>
        </div>
      </div>
    </div>"""

MODAL = """    <div class="fixed inset-0 bg-black/80 flex items-center justify-center p-4 z-50" id="challenge-modal">
      <div class="bg-gray-900 rounded-xl p-6 max-w-2xl w-full border border-gray-700">
        <div class="flex justify-between items-start mb-4">
          <div>
            <span class="text-xs px-2 py-1 rounded {difficulty_class}">{difficulty}</span>
            <span class="text-xs px-2 py-1 rounded ml-2 {category_class}">{category}</span>
          </div>
          <a href="/" class="text-gray-400 hover:text-white text-xl" aria-label="Close">&times;</a>
        </div>
        <h3 class="text-xl font-semibold mb-2">Challenge #{number}: {title}</h3>
        <p class="text-gray-300 mb-4">{description}</p>
{hint}{error}        <form method="post" action="/challenges/{challenge_id}/submit" class="space-y-4" data-busy-label="Submitting...">
          <div>
            <label class="block text-sm text-gray-400 mb-1" for="answer">Your Solution (explain your approach)</label>
            <textarea id="answer" name="answer" data-required placeholder="Describe how you would solve this..."
                      class="w-full bg-gray-800 border border-gray-700 rounded-lg px-4 py-2 h-32">{answer}</textarea>
          </div>
          <div>
            <label class="block text-sm text-gray-400 mb-1" for="code_snippet">Code Snippet (optional)</label>
            <textarea id="code_snippet" name="code_snippet" placeholder="-- SQL or TypeScript code here..."
                      class="w-full bg-gray-800 border border-gray-700 rounded-lg px-4 py-2 h-40 font-mono text-sm">{code_snippet}</textarea>
          </div>
          <button type="submit" id="submit-btn"{disabled}
                  class="w-full bg-green-600 hover:bg-green-700 disabled:bg-gray-700 rounded-lg py-3 font-semibold">{label}</button>
        </form>
      </div>
    </div>"""

HINT = """        <div class="bg-yellow-500/10 border border-yellow-500/30 rounded-lg p-3 mb-4">
          <p class="text-yellow-400 text-sm"><strong>Hint:</strong> {hint}</p>
        </div>
"""

ERROR = """        <div class="bg-red-500/10 border border-red-500/30 rounded-lg p-3 mb-4" role="alert">
          <p class="text-red-400 text-sm">{message}</p>
        </div>
"""

CARD_HEAD = """          <div class="flex justify-between items-start mb-3">
            <div class="flex gap-2">
              <span class="text-xs px-2 py-1 rounded {difficulty_class}">{difficulty}</span>
              <span class="text-xs px-2 py-1 rounded {category_class}">{category}</span>
            </div>
            <span class="text-green-400 font-semibold">+{points} pts</span>
          </div>
          <h3 class="text-lg font-semibold mb-2">#{number}: {title}</h3>
          <p class="text-gray-400 text-sm line-clamp-2">{description}</p>"""

OPEN_CARD = """        <a href="/?challenge={challenge_id}" data-challenge-id="{challenge_id}" data-submitted="false"
           class="block bg-gray-900 rounded-xl p-6 border border-gray-800 hover:border-green-500/50">
{head}
        </a>"""

SUBMITTED_CARD = """        <div data-challenge-id="{challenge_id}" data-submitted="true"
             class="bg-gray-900 rounded-xl p-6 border border-green-500/30 bg-green-500/5">
{head}
          <div class="mt-4 flex items-center text-green-400">Submitted</div>
        </div>"""

# Enables the form buttons only while every data-required field has text,
# and swaps in the busy label once the form is posted.
SCRIPT = """  <script>
    document.querySelectorAll('form[data-busy-label]').forEach(function (form) {
      var button = form.querySelector('button[type=submit]');
      var required = form.querySelectorAll('[data-required]');
      function sync() {
        button.disabled = Array.prototype.some.call(required, function (f) { return !f.value.trim(); });
      }
      required.forEach(function (f) { f.addEventListener('input', sync); });
      form.addEventListener('submit', function () {
        button.disabled = true;
        button.textContent = form.dataset.busyLabel;
      });
    });
  </script>"""


def _disabled(enabled: bool) -> str:
    return "" if enabled else " disabled"


def _error_block(message: str | None) -> str:
    return ERROR.format(message=escape(message)) if message else ""


def _card_head(challenge: ChallengeSchema) -> str:
    return CARD_HEAD.format(
        difficulty_class=difficulty_badge(challenge.difficulty),
        difficulty=escape(challenge.difficulty),
        category_class=category_badge(challenge.category),
        category=escape(challenge.category),
        points=challenge.points,
        number=challenge.challenge_number,
        title=escape(challenge.title),
        description=escape(challenge.description),
    )


def render_card(state: st.AssessmentState, challenge: ChallengeSchema) -> str:
    template = SUBMITTED_CARD if st.is_submitted(state, challenge.id) else OPEN_CARD
    return template.format(challenge_id=escape(challenge.id, quote=True), head=_card_head(challenge))


def render_register(state: st.AssessmentState) -> str:
    return REGISTER_FORM.format(
        error=_error_block(state.error),
        name=escape(state.name, quote=True),
        email=escape(state.email, quote=True),
        disabled=_disabled(st.can_register(state)),
        label="Registering..." if state.registering else "Start Assessment",
    )


def render_modal(state: st.AssessmentState) -> str:
    challenge = state.selected_challenge
    if challenge is None:
        return ""
    return MODAL.format(
        difficulty_class=difficulty_badge(challenge.difficulty),
        difficulty=escape(challenge.difficulty),
        category_class=category_badge(challenge.category),
        category=escape(challenge.category),
        number=challenge.challenge_number,
        title=escape(challenge.title),
        description=escape(challenge.description),
        hint=HINT.format(hint=escape(challenge.hint or "")) if challenge.has_hint else "",
        error=_error_block(state.error),
        challenge_id=escape(challenge.id, quote=True),
        answer=escape(state.answer),
        code_snippet=escape(state.code_snippet),
        disabled=_disabled(st.can_submit(state)),
        label="Submitting..." if state.submitting else f"Submit Answer (+{challenge.points} pts)",
    )


CATALOG_FAILED = "Challenges could not be loaded. Please reload the page."


def render_dashboard(state: st.AssessmentState) -> str:
    if state.candidate is None:
        return ""
    parts: List[str] = [
        WELCOME.format(
            name=escape(state.candidate.name),
            completed=st.completed_count(state),
            total=len(state.challenges),
        ),
        render_modal(state),
    ]
    cards = "\n".join(render_card(state, c) for c in state.challenges)
    parts.append(f'    <div class="grid md:grid-cols-2 gap-4" id="challenges">\n{cards}\n    </div>')
    return "\n".join(p for p in parts if p)


def render_page(state: st.AssessmentState) -> str:
    title = escape(get_settings().app_name)
    if state.loading:
        return LOADING_PAGE.format(title=title)
    body = render_register(state) if state.candidate is None else render_dashboard(state)
    if state.catalog_failed:
        body = _error_block(CATALOG_FAILED) + body
    return PAGE.format(title=title, body=body, script=SCRIPT)


__all__ = ["render_page", "render_card", "render_modal", "render_register", "render_dashboard"]

"""
Deterministic HTML renderer for presentation mode.

Takes the four ``Slide`` models built by ``renderer.build_slides`` and
produces a self-contained HTML presentation with:
- Keyboard navigation (Arrow keys / Space)
- Previous / Next buttons and progress dots
- A close button that leaves presentation mode
- Right-to-left layout for Arabic
"""

from __future__ import annotations

import html as html_mod

from pitch_expert.core.i18n import Language, t, text_direction
from pitch_expert.schemas.display import Slide


def _e(text: str | None) -> str:
    """HTML-escape helper."""
    return html_mod.escape(text or "")


def _points(slide: Slide) -> str:
    return "\n".join(f"<li>{_e(p)}</li>" for p in slide.points)


def _render_cover(slide: Slide) -> str:
    sub = f'<p class="cover-subtitle">{_e(slide.subheadline)}</p>' if slide.subheadline else ""
    points = f'<ul class="slide-points">{_points(slide)}</ul>' if slide.points else ""
    return f"""
    <section class="slide" data-slide="{slide.index}">
      <div class="slide-content cover-content">
        <div class="slide-kicker">{_e(slide.title)}</div>
        <h1 class="cover-title">{_e(slide.headline)}</h1>
        {sub}
        {points}
      </div>
    </section>"""


def _render_standard(slide: Slide, slide_class: str = "") -> str:
    sub = f'<p class="slide-sub">{_e(slide.subheadline)}</p>' if slide.subheadline else ""
    return f"""
    <section class="slide {slide_class}" data-slide="{slide.index}">
      <div class="slide-content">
        <h2 class="slide-headline">{_e(slide.title)}</h2>
        <ul class="slide-points">{_points(slide)}</ul>
        {sub}
      </div>
    </section>"""


def render_presentation_deck(
    slides: list[Slide],
    language: Language,
    start_index: int = 0,
    title: str = "",
    close_url: str = "/",
) -> str:
    """Render the presentation slides into a self-contained HTML page."""

    slides_html = [_render_cover(slides[0])]
    slides_html.extend(_render_standard(s) for s in slides[1:-1])
    slides_html.append(_render_standard(slides[-1], "slide-closing"))

    total_slides = len(slides)
    dots = "".join(
        f'<span class="dot{" active" if i == start_index else ""}" data-dot="{i}"></span>'
        for i in range(total_slides)
    )

    return f"""<!DOCTYPE html>
<html lang="{language.value}" dir="{text_direction(language)}">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{_e(title)}: {_e(t("presentationModeButton", language))}</title>
<style>
*, *::before, *::after {{ box-sizing: border-box; margin: 0; padding: 0; }}

html, body {{
  width: 100%; height: 100%; overflow: hidden;
  font-family: 'Segoe UI', Tahoma, sans-serif;
  background: #1a1a2e; color: #fff;
}}

/* --- Slide system --- */
.deck {{ position: relative; width: 100vw; height: 100vh; overflow: hidden; }}

.slide {{
  position: absolute; inset: 0;
  display: flex; align-items: center; justify-content: center;
  opacity: 0;
  transform: translateY(30px);
  transition: opacity 0.6s ease, transform 0.6s ease;
  pointer-events: none;
}}
.slide.active {{ opacity: 1; transform: translateY(0); pointer-events: auto; }}

.slide-content {{
  max-width: min(90vw, 900px);
  padding: clamp(24px, 4vw, 60px);
  background: rgba(255,255,255,0.05);
  border: 1px solid rgba(255,255,255,0.1);
  border-radius: clamp(16px, 2vw, 28px);
}}

/* --- Cover --- */
.cover-content {{ text-align: center; }}
.slide-kicker {{
  font-size: clamp(11px, 1.2vw, 14px);
  font-weight: 600;
  text-transform: uppercase;
  letter-spacing: 0.15em;
  color: #f9b21d;
  margin-bottom: 16px;
}}
.cover-title {{ font-size: clamp(36px, 6vw, 72px); font-weight: 800; line-height: 1.1; }}
.cover-subtitle {{ margin-top: 16px; font-size: clamp(16px, 2vw, 24px); color: rgba(255,255,255,0.7); }}

/* --- Standard slides --- */
.slide-headline {{
  font-size: clamp(26px, 4vw, 48px);
  font-weight: 700;
  margin-bottom: clamp(16px, 2vw, 28px);
  color: #e42527;
}}
.slide-sub {{ margin-top: 20px; font-size: clamp(13px, 1.4vw, 17px); font-style: italic; color: rgba(255,255,255,0.6); }}
.slide-points {{ list-style: none; display: flex; flex-direction: column; gap: 12px; margin-top: 12px; }}
.slide-points li {{
  font-size: clamp(14px, 1.6vw, 20px);
  color: rgba(255,255,255,0.85);
  padding-inline-start: 22px;
  position: relative;
}}
.slide-points li::before {{
  content: '';
  position: absolute; inset-inline-start: 0; top: 0.6em;
  width: 8px; height: 8px; border-radius: 50%;
  background: #e42527;
}}
.slide-closing .slide-points li::before {{ background: #f9b21d; }}

/* --- Controls --- */
.controls {{
  position: fixed; bottom: clamp(16px, 2vw, 32px); left: 50%; transform: translateX(-50%);
  display: flex; align-items: center; gap: 16px; z-index: 100;
}}
.controls button, .close-btn {{
  background: rgba(255,255,255,0.1); color: #fff;
  border: 1px solid rgba(255,255,255,0.2); border-radius: 8px;
  padding: 8px 16px; font-size: 14px; cursor: pointer; text-decoration: none;
}}
.progress {{ display: flex; gap: 8px; }}
.dot {{ width: 8px; height: 8px; border-radius: 50%; background: rgba(255,255,255,0.25); cursor: pointer; }}
.dot.active {{ background: #e42527; transform: scale(1.3); }}
.close-btn {{ position: fixed; top: 20px; inset-inline-end: 20px; z-index: 100; }}
.slide-counter {{
  position: fixed; top: 28px; inset-inline-start: 24px;
  font-size: 13px; font-weight: 600; color: rgba(255,255,255,0.4); z-index: 100;
}}
</style>
</head>
<body>
<div class="deck">
  {"".join(slides_html)}
</div>

<a class="close-btn" href="{_e(close_url)}" id="close">{_e(t("closePresentation", language))}</a>
<div class="slide-counter"><span id="current">{start_index + 1}</span> / {total_slides}</div>
<div class="controls">
  <button type="button" id="prev">{_e(t("previousSlide", language))}</button>
  <div class="progress">{dots}</div>
  <button type="button" id="next">{_e(t("nextSlide", language))}</button>
</div>

<script>
(function() {{
  const TOTAL = {total_slides};
  let current = {start_index};
  const slides = document.querySelectorAll('.slide');
  const dots = document.querySelectorAll('.dot');
  const counter = document.getElementById('current');

  function goTo(n) {{
    n = Math.max(0, Math.min(TOTAL - 1, n));
    slides[current].classList.remove('active');
    dots[current].classList.remove('active');
    current = n;
    slides[current].classList.add('active');
    dots[current].classList.add('active');
    counter.textContent = current + 1;
    fetch('slide', {{
      method: 'PUT',
      headers: {{ 'Content-Type': 'application/json' }},
      body: JSON.stringify({{ index: current }})
    }});
  }}

  slides[current].classList.add('active');

  document.addEventListener('keydown', function(e) {{
    if (e.key === 'ArrowRight' || e.key === ' ') {{ e.preventDefault(); goTo(current + 1); }}
    if (e.key === 'ArrowLeft') {{ e.preventDefault(); goTo(current - 1); }}
    if (e.key === 'Escape') {{ document.getElementById('close').click(); }}
  }});
  document.getElementById('next').addEventListener('click', function() {{ goTo(current + 1); }});
  document.getElementById('prev').addEventListener('click', function() {{ goTo(current - 1); }});
  dots.forEach(function(dot, i) {{
    dot.addEventListener('click', function() {{ goTo(i); }});
  }});
  document.getElementById('close').addEventListener('click', function(e) {{
    e.preventDefault();
    fetch('close', {{ method: 'POST' }}).finally(function() {{ window.location = '{_e(close_url)}'; }});
  }});
}})();
</script>
</body>
</html>"""

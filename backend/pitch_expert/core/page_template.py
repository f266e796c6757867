"""
Deterministic HTML renderer for the single page.

Takes a ``SessionView`` and produces the whole page: header with branding
and language toggle, the research form, loading / error states, the result
sections and the feature suggestion box. Every user action is a small
``fetch`` against the JSON API followed by a reload, so the server-side
session stays the single source of truth.
"""

from __future__ import annotations

import html as html_mod

from pitch_expert.core.i18n import t
from pitch_expert.schemas.display import DisplaySections, SessionView
from pitch_expert.schemas.pitch import FORM_FIELDS

RESULTS_ANCHOR = "results-section"


def _e(text: str | None) -> str:
    """HTML-escape helper."""
    return html_mod.escape(text or "")


def _render_header(view: SessionView) -> str:
    lang = view.language
    return f"""
<header class="header">
  <div class="logos">
    <img src="{_e(view.config.logo_eand_url)}" alt="e&amp; Logo" class="logo-eand">
    <span class="divider"></span>
    <img src="{_e(view.config.logo_zoho_url)}" alt="Zoho Logo" class="logo-zoho">
  </div>
  <h1>{_e(t("appTitle", lang))}</h1>
  <button type="button" class="btn btn-red" data-action="language">{_e(t("languageToggle", lang))}</button>
</header>"""


def _render_form(view: SessionView) -> str:
    lang = view.language
    disabled = " disabled" if view.is_loading else ""
    fields = []
    for name in FORM_FIELDS:
        value = getattr(view.form, name)
        label = _e(t(f"{name}Label", lang))
        placeholder = _e(t(f"{name}Placeholder", lang))
        if name == "description":
            control = f'<textarea name="{name}" rows="4" placeholder="{placeholder}"{disabled}>{_e(value)}</textarea>'
            fields.append(f'<div class="field wide"><label>{label}</label>{control}</div>')
        else:
            control = f'<input type="text" name="{name}" value="{_e(value)}" placeholder="{placeholder}"{disabled}>'
            fields.append(f'<div class="field"><label>{label}</label>{control}</div>')

    error = f'<div class="error-box">{_e(view.error)}</div>' if view.error is not None else ""
    return f"""
<section class="card">
  <h2>{_e(t("inputSectionTitle", lang))}</h2>
  <div class="grid">{"".join(fields)}</div>
  {error}
  <div class="actions">
    <button type="button" class="btn btn-red btn-lg" data-action="generate"{disabled}>{_e(t("generateButton", lang))}</button>
    <button type="button" class="btn btn-gray" data-action="clear"{disabled}>{_e(t("clearButton", lang))}</button>
  </div>
</section>"""


def _render_loading(view: SessionView) -> str:
    lang = view.language
    return f"""
<section class="card center" id="loading">
  <div class="spinner"></div>
  <p class="loading-msg">{_e(t("loadingMessage", lang))}</p>
  <p class="muted">{_e(t("loadingSubtext", lang))}</p>
</section>"""


def _render_sections(sections: DisplaySections, view: SessionView) -> str:
    lang = view.language
    parts = []

    toolbar = []
    if view.config.enable_presentation_mode:
        toolbar.append(f'<button type="button" class="btn btn-gold" data-action="presentation">{_e(t("presentationModeButton", lang))}</button>')
    toolbar.append(f'<button type="button" class="btn btn-red" data-action="pdf">{_e(t("downloadPDF", lang))}</button>')
    parts.append(f'<section class="card toolbar"><h2>{_e(sections.heading)}</h2><div class="actions">{"".join(toolbar)}</div></section>')

    industry = sections.industry
    badge = ""
    if industry.badge is not None:
        badge = f'<span class="badge {_e(industry.badge.color_class)}">{_e(industry.badge.label)}</span>'
    summary = ""
    if sections.research_summary is not None:
        summary = f'<div class="panel blue"><h4>{_e(sections.research_summary.title)}</h4><p>{_e(sections.research_summary.text)}</p></div>'
    pains = ""
    if sections.pain_points is not None:
        items = "".join(f'<li class="pain">{_e(p)}</li>' for p in sections.pain_points.items)
        pains = f'<h4>{_e(sections.pain_points.title)}</h4><ul class="pains">{items}</ul>'
    parts.append(f"""
<section class="card">
  <h3>{_e(industry.title)}</h3>
  <div class="grid">
    <div class="panel"><h4>{_e(industry.label)}</h4><span class="industry">{_e(industry.value)}</span>{badge}</div>
    {summary}
  </div>
  {pains}
</section>""")

    if sections.automations is not None:
        cards = []
        for card in sections.automations.cards:
            metrics = "".join(
                f'<div class="metric"><strong>{_e(m.label)}:</strong> {_e(m.value)}</div>' for m in card.metrics
            )
            cards.append(f'<div class="tile"><h4>{_e(card.title)}</h4>{metrics}</div>')
        parts.append(f'<section class="card"><h3>{_e(sections.automations.title)}</h3><div class="grid">{"".join(cards)}</div></section>')

    if sections.solutions is not None:
        cards = []
        for card in sections.solutions.cards:
            detail = ""
            if card.expanded and card.paragraphs:
                detail = '<div class="detail">' + "".join(f"<p>{_e(p)}</p>" for p in card.paragraphs) + "</div>"
            cards.append(f"""
<div class="tile">
  <div class="tile-head">
    <div><h4>{_e(card.title)}</h4><p class="muted">{_e(card.summary)}</p></div>
    <button type="button" class="btn btn-red btn-sm" data-action="solution" data-index="{card.index}">{_e(card.toggle_label)}</button>
  </div>
  {detail}
</div>""")
        parts.append(f'<section class="card"><h3>{_e(sections.solutions.title)}</h3>{"".join(cards)}</section>')

    if sections.proposal is not None:
        proposal = sections.proposal
        benefits = "".join(f'<li><span class="check">✓</span> {_e(b)}</li>' for b in proposal.benefits)
        copy_label = t("copied", lang) if view.copied else t("copyToClipboard", lang)
        parts.append(f"""
<section class="card">
  <h3>{_e(proposal.title)}</h3>
  <ul class="benefits">{benefits}</ul>
  <p class="muted italic">{_e(proposal.closing)}</p>
  <div class="actions">
    <button type="button" class="btn btn-gray" data-action="email">{_e(t("shareEmail", lang))}</button>
    <button type="button" class="btn btn-gray" data-action="whatsapp">{_e(t("shareWhatsApp", lang))}</button>
    <button type="button" class="btn btn-gray" data-action="copy">{_e(copy_label)}</button>
  </div>
</section>""")

    if sections.sales_tip is not None:
        parts.append(f'<section class="card gold"><h3>{_e(sections.sales_tip.title)}</h3><p>{_e(sections.sales_tip.text)}</p></section>')

    if sections.deep_dive is not None:
        dd = sections.deep_dive
        cards = "".join(
            f"""<div class="tile"><h4>{_e(ex.zoho_app)}</h4>
<p><strong>{_e(dd.feature_label)}:</strong> {_e(ex.feature)}</p>
<p><strong>{_e(dd.benefit_label)}:</strong> {_e(ex.benefit)}</p>
<p><strong>{_e(dd.how_to_build_label)}:</strong> {_e(ex.implementation)}</p></div>"""
            for ex in dd.examples
        )
        parts.append(f'<section class="card"><h3>{_e(dd.title)}</h3><div class="grid">{cards}</div></section>')

    return f'<div id="{RESULTS_ANCHOR}">{"".join(parts)}</div>'


def _render_suggestions(view: SessionView) -> str:
    lang = view.language
    disabled = " disabled" if view.suggestion_submitting else ""
    status = ""
    if view.suggestion_message is not None:
        cls = "ok" if view.suggestion_status == "success" else "err"
        status = f'<p class="{cls}">{_e(view.suggestion_message)}</p>'
    return f"""
<section class="suggest">
  <h3>{_e(t("featureSuggestionTitle", lang))}</h3>
  <textarea name="suggestion" rows="3" placeholder="{_e(t("featurePlaceholder", lang))}"{disabled}></textarea>
  <div class="suggest-foot">
    <p class="muted">{_e(t("privacyNote", lang))}</p>
    <button type="button" class="btn btn-red" data-action="suggest"{disabled}>{_e(t("submitIdea", lang))}</button>
  </div>
  {status}
</section>"""


def render_page(view: SessionView, api_prefix: str, scroll_delay_ms: int = 100) -> str:
    """Render the single page for *view*. *api_prefix* is where the JSON API lives."""
    body = [_render_form(view)]
    if view.is_loading:
        body.append(_render_loading(view))
    elif view.results is not None:
        body.append(_render_sections(view.results, view))

    suggestions = _render_suggestions(view) if view.config.enable_feature_suggestions else ""

    return f"""<!DOCTYPE html>
<html lang="{view.language.value}" dir="{view.direction}">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{_e(t("appTitle", view.language))}</title>
<style>
* {{ box-sizing: border-box; }}
body {{ margin: 0; font-family: 'Segoe UI', Tahoma, sans-serif; background: #f5f5f5; color: #1a1a2e; }}
.header {{ position: sticky; top: 0; z-index: 50; background: #fff; box-shadow: 0 2px 6px rgba(0,0,0,.08);
  display: flex; align-items: center; justify-content: space-between; flex-wrap: wrap; gap: 16px; padding: 16px 24px; }}
.header h1 {{ flex: 1; font-size: 22px; margin: 0; }}
.logos {{ display: flex; align-items: center; gap: 20px; }}
.logo-eand {{ height: 48px; }} .logo-zoho {{ height: 40px; }}
.divider {{ width: 1px; height: 32px; background: #d1d5db; }}
main {{ max-width: 1200px; margin: 0 auto; padding: 32px 16px; }}
.card {{ background: #fff; border-radius: 12px; box-shadow: 0 4px 12px rgba(0,0,0,.06); padding: 28px; margin-top: 28px; }}
.card.gold {{ background: #fff8e1; }}
.center {{ text-align: center; }}
.grid {{ display: grid; grid-template-columns: repeat(auto-fit, minmax(320px, 1fr)); gap: 20px; }}
.field label {{ display: block; font-size: 14px; margin-bottom: 6px; color: #374151; }}
.field input, .field textarea, .suggest textarea {{ width: 100%; padding: 10px 14px; border: 1px solid #d1d5db; border-radius: 8px; font: inherit; }}
.field.wide {{ grid-column: 1 / -1; }}
.error-box {{ margin-top: 16px; padding: 14px; background: #fef2f2; border: 1px solid #fecaca; border-radius: 8px; color: #b91c1c; }}
.actions {{ display: flex; gap: 12px; flex-wrap: wrap; margin-top: 20px; }}
.toolbar {{ display: flex; justify-content: space-between; align-items: center; flex-wrap: wrap; }}
.toolbar .actions {{ margin-top: 0; }}
.btn {{ border: 0; border-radius: 8px; padding: 10px 20px; font: inherit; cursor: pointer; }}
.btn:disabled {{ opacity: .5; cursor: not-allowed; }}
.btn-red {{ background: #e42527; color: #fff; }} .btn-gold {{ background: #f9b21d; }} .btn-gray {{ background: #e5e7eb; }}
.btn-lg {{ font-size: 18px; padding: 12px 32px; }} .btn-sm {{ font-size: 13px; padding: 6px 14px; }}
.panel {{ background: #f9fafb; border-radius: 8px; padding: 16px; }} .panel.blue {{ background: #eff6ff; }}
.industry {{ font-size: 18px; font-weight: 700; }}
.badge {{ margin-inline-start: 10px; font-size: 13px; padding: 3px 10px; border-radius: 999px; background: #f3f4f6; }}
.text-green-600 {{ color: #16a34a; }} .text-yellow-600 {{ color: #ca8a04; }} .text-red-600 {{ color: #dc2626; }} .text-gray-600 {{ color: #4b5563; }}
.pains {{ list-style: none; padding: 0; display: grid; grid-template-columns: repeat(auto-fit, minmax(300px, 1fr)); gap: 10px; }}
.pain {{ background: #fef2f2; border-radius: 8px; padding: 12px; }}
.tile {{ border: 1px solid #e5e7eb; border-radius: 8px; padding: 18px; margin-bottom: 14px; }}
.tile-head {{ display: flex; justify-content: space-between; gap: 16px; align-items: flex-start; }}
.detail {{ margin-top: 14px; padding: 14px; background: #f9fafb; border-radius: 8px; }}
.benefits {{ list-style: none; padding: 0; }} .benefits li {{ margin-bottom: 10px; }}
.check {{ color: #e42527; font-weight: 700; }}
.muted {{ color: #6b7280; }} .italic {{ font-style: italic; }}
.spinner {{ width: 48px; height: 48px; margin: 0 auto 20px; border: 4px solid #e5e7eb; border-top-color: #e42527; border-radius: 50%; animation: spin 1s linear infinite; }}
@keyframes spin {{ to {{ transform: rotate(360deg); }} }}
.suggest {{ max-width: 900px; margin: 40px auto 0; background: #fff; border-top: 1px solid #e5e7eb; padding: 28px 16px; }}
.suggest-foot {{ display: flex; justify-content: space-between; align-items: center; margin-top: 12px; gap: 12px; }}
.ok {{ color: #16a34a; }} .err {{ color: #dc2626; }}
footer {{ background: #1a1a2e; color: #fff; text-align: center; padding: 20px; margin-top: 48px; font-size: 14px; }}
</style>
</head>
<body>
{_render_header(view)}
<main>
{"".join(body)}
</main>
{suggestions}
<footer>© {_e(view.config.project_name)}</footer>
<script>
(function() {{
  const API = '{_e(api_prefix)}';
  const SCROLL_KEY = 'scrollToResults';

  function call(method, path, body) {{
    return fetch(API + path, {{
      method: method,
      headers: {{ 'Content-Type': 'application/json' }},
      body: body === undefined ? undefined : JSON.stringify(body)
    }}).then(function(r) {{
      return r.json().catch(function() {{ return {{}}; }}).then(function(data) {{
        if (!r.ok) {{ throw new Error(data.detail || ('HTTP ' + r.status)); }}
        return data;
      }});
    }});
  }}

  function reload() {{ window.location.reload(); }}

  document.querySelectorAll('.field input, .field textarea').forEach(function(el) {{
    el.addEventListener('change', function() {{
      call('PATCH', '/session/form', {{ field: el.name, value: el.value }});
    }});
  }});

  function syncForm() {{
    const fields = Array.from(document.querySelectorAll('.field input, .field textarea'));
    return Promise.all(fields.map(function(el) {{
      return call('PATCH', '/session/form', {{ field: el.name, value: el.value }});
    }}));
  }}

  function act(name, el) {{
    switch (name) {{
      case 'language': return call('POST', '/session/language').then(reload);
      case 'clear': return call('POST', '/session/clear').then(reload);
      case 'generate':
        document.querySelectorAll('[data-action="generate"], [data-action="clear"]').forEach(function(b) {{ b.disabled = true; }});
        return syncForm().then(function() {{ return call('POST', '/session/generate'); }}).then(function(res) {{
          if (res.scroll_to) {{ sessionStorage.setItem(SCROLL_KEY, res.scroll_to); }}
        }}).finally(reload);
      case 'solution': return call('POST', '/session/solutions/' + el.dataset.index + '/toggle').then(reload);
      case 'presentation':
        return call('POST', '/presentation/open').then(function() {{ window.location = API + '/presentation/deck'; }});
      case 'pdf':
        return fetch(API + '/exports/pdf').then(function(r) {{
          if (!r.ok) {{ return r.json().then(function(d) {{ alert(d.detail); }}); }}
          window.location = API + '/exports/pdf';
        }});
      case 'email': return call('GET', '/exports/share').then(function(s) {{ window.location.href = s.mailto; }});
      case 'whatsapp': return call('GET', '/exports/share').then(function(s) {{ window.open(s.whatsapp, '_blank'); }});
      case 'copy':
        return call('POST', '/exports/clipboard').then(function(c) {{
          return navigator.clipboard.writeText(c.text).then(function() {{
            el.textContent = c.ack_label;
            setTimeout(reload, c.ack_seconds * 1000);
          }});
        }});
      case 'suggest':
        const box = document.querySelector('textarea[name="suggestion"]');
        if (!box.value.trim()) {{ return; }}
        return call('POST', '/suggestions', {{ suggestion: box.value }}).finally(reload);
    }}
  }}

  document.querySelectorAll('[data-action]').forEach(function(el) {{
    el.addEventListener('click', function() {{
      const p = act(el.dataset.action, el);
      if (p && p.catch) {{ p.catch(function(err) {{ alert(err.message); }}); }}
    }});
  }});

  const target = sessionStorage.getItem(SCROLL_KEY);
  if (target) {{
    sessionStorage.removeItem(SCROLL_KEY);
    setTimeout(function() {{
      const node = document.getElementById(target);
      if (node) {{ node.scrollIntoView({{ behavior: 'smooth', block: 'start' }}); }}
    }}, {scroll_delay_ms});
  }}
}})();
</script>
</body>
</html>"""

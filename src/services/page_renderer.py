"""HTML rendering of the tip board page."""

from html import escape

from src.models.session_state import LedgerState, RotationState
from src.models.trading_tip import TipRecord

APP_NAME = "SoftWork"
COPYRIGHT_YEAR = 2024

FEATURES = (
    ("🎯", "Accurate Analysis", "Our tips are based on technical analysis and market trends"),
    ("⚡", "Real-time Updates", "Get the latest market movements and opportunities"),
    ("🔒", "Completely Free", "No hidden fees, no premium subscriptions required"),
)

_STYLE = """
    body { font-family: Arial, sans-serif; line-height: 1.6; color: #333; margin: 0; background: #f4f6f8; }
    .container { max-width: 800px; margin: 0 auto; padding: 20px; }
    .header { background-color: #2c3e50; color: white; }
    .tip-card { background: white; border-left: 4px solid #007bff; padding: 15px; border-radius: 3px; }
    .tip-card.buy { border-color: #28a745; }
    .tip-card.watch { border-color: #ffc107; }
    .tip-card.hold { border-color: #6c757d; }
    .tip-header { display: flex; gap: 12px; font-weight: bold; }
    .type.buy { color: #155724; }
    .type.watch { color: #856404; }
    .type.hold { color: #383d41; }
    .dot { width: 12px; height: 12px; border-radius: 50%; border: none; background: #ccc; margin: 0 3px; cursor: pointer; }
    .dot.active { background: #007bff; }
    .message { margin-top: 10px; font-weight: bold; }
    .features-grid { display: flex; gap: 15px; }
    .feature { flex: 1; background: white; padding: 15px; border-radius: 3px; }
    .footer { text-align: center; font-size: 12px; color: #666; border-top: 1px solid #ddd; }
"""

_SCRIPT = """
    async function refreshTips() {
        const response = await fetch('/partials/tip-display');
        if (response.ok) {
            document.getElementById('tip-display').outerHTML = await response.text();
        }
    }

    async function refreshStatus() {
        const response = await fetch('/api/subscriptions');
        if (response.ok) {
            const ledger = await response.json();
            document.getElementById('status-message').textContent = ledger.status_message;
        }
    }

    async function selectTip(index) {
        await fetch('/api/tips/select', {
            method: 'POST',
            headers: {'Content-Type': 'application/json'},
            body: JSON.stringify({index: index})
        });
        await refreshTips();
    }

    async function subscribe(event) {
        event.preventDefault();
        const email = document.getElementById('email').value;
        await fetch('/api/subscriptions', {
            method: 'POST',
            headers: {'Content-Type': 'application/json'},
            body: JSON.stringify({email: email})
        });
        window.location.reload();
    }
"""


def _render_tip_card(tip: TipRecord) -> str:
    type_class = escape(tip.type.lower())
    html = f"""
            <div class="tip-card {type_class}">
                <div class="tip-header">
                    <span class="symbol">{escape(tip.symbol)}</span>
                    <span class="type {type_class}">{escape(tip.type)}</span>
                    <span class="confidence">Confidence: {escape(tip.confidence)}</span>
                </div>
                <p class="tip-content">{escape(tip.tip)}</p>
    """
    if tip.has_quote:
        html += f"""
                <div class="price-info">
                    <span>Current Price: ${escape(tip.price)}</span>
        """
        if tip.change:
            html += f'<span class="change">{escape(tip.change)}</span>'
        html += "</div>"
    html += "</div>"
    return html


def render_tip_display(rotation: RotationState) -> str:
    """Render the tip section on its own, so the page can swap it in place."""
    html = '<section id="tip-display" class="tip-display"><h3>💡 Latest Trading Tip</h3>'

    current = rotation.current_tip()
    if rotation.loading:
        html += '<div class="loading">Loading market data...</div>'
    elif current is not None:
        html += _render_tip_card(current)
    else:
        html += '<div class="no-tips">No tips available at the moment.</div>'

    if rotation.rotation_active:
        dots = "".join(
            f'<button class="dot{" active" if index == rotation.current_index else ""}" '
            f'onclick="selectTip({index})" aria-label="Show tip {index + 1}"></button>'
            for index in range(rotation.count)
        )
        html += f"""
            <div class="tip-navigation">
                <div class="tip-dots">{dots}</div>
                <p class="tip-counter">Tip {rotation.current_index + 1} of {rotation.count}</p>
            </div>
        """

    html += "</section>"
    return html


def _render_subscription(ledger: LedgerState) -> str:
    html = f"""
        <section class="subscription">
            <h3>📧 Subscribe for Daily Tips</h3>
            <form class="email-form" onsubmit="subscribe(event)">
                <div class="input-group">
                    <input id="email" type="email" class="email-input" required
                           placeholder="Enter your email address" value="{escape(ledger.pending_input)}">
                    <button type="submit" class="subscribe-btn">Subscribe</button>
                </div>
            </form>
    """
    html += f'<div id="status-message" class="message">{escape(ledger.status_message)}</div>'
    html += "</section>"
    return html


def _render_features() -> str:
    items = "".join(
        f"""
                <div class="feature">
                    <div class="feature-icon">{icon}</div>
                    <h4>{escape(title)}</h4>
                    <p>{escape(text)}</p>
                </div>
        """
        for icon, title, text in FEATURES
    )
    return f"""
        <section class="features">
            <h3>Why Choose {APP_NAME}?</h3>
            <div class="features-grid">{items}</div>
        </section>
    """


def _render_subscribers(ledger: LedgerState) -> str:
    if not ledger.emails:
        return ""
    rows = "".join(f'<div class="subscriber">{escape(email)}</div>' for email in ledger.emails)
    return f"""
        <section class="subscribers">
            <h3>📊 Subscribers ({ledger.count})</h3>
            <div class="subscriber-list">{rows}</div>
        </section>
    """


def render_page(
    rotation: RotationState,
    ledger: LedgerState,
    refresh_seconds: float | None = None,
) -> str:
    """
    Render the full tip board page from the current state.

    Args:
        rotation: Tip list, displayed index and loading flag
        ledger: Subscribers, form input and status message
        refresh_seconds: Optional period for re-fetching the tip section and
            status message in place; the email input is never reloaded

    Returns:
        Complete HTML document
    """
    poller = ""
    if refresh_seconds:
        period_ms = max(1000, round(refresh_seconds * 1000))
        poller = f"""
    setInterval(function () {{
        refreshTips();
        refreshStatus();
    }}, {period_ms});
"""

    return f"""<!DOCTYPE html>
<html lang="en">
    <head>
        <meta charset="UTF-8">
        <meta name="viewport" content="width=device-width, initial-scale=1.0">
        <title>{APP_NAME} | Trading Tips</title>
        <style>{_STYLE}</style>
    </head>
    <body>
        <header class="header">
            <div class="container">
                <h1 class="logo">📈 {APP_NAME}</h1>
                <p class="tagline">Smart Trading Tips for Smart Investors</p>
            </div>
        </header>
        <main class="main">
            <div class="container">
                <section class="hero">
                    <h2>Get Free Market Trading Tips</h2>
                    <p>Join thousands of traders receiving daily market insights and trading opportunities directly to their inbox.</p>
                </section>
                {render_tip_display(rotation)}
                {_render_subscription(ledger)}
                {_render_features()}
                {_render_subscribers(ledger)}
            </div>
        </main>
        <footer class="footer">
            <div class="container">
                <p>&copy; {COPYRIGHT_YEAR} {APP_NAME}. All rights reserved.</p>
                <p class="disclaimer">⚠️ Disclaimer: Trading tips are for educational purposes only. Always do your own research before making investment decisions.</p>
            </div>
        </footer>
        <script>{_SCRIPT}{poller}</script>
    </body>
</html>
"""

"""Tests for tip board page rendering."""

from src.models import session_state
from src.models.session_state import LedgerState, RotationState
from src.models.trading_tip import TipRecord
from src.services.page_renderer import FEATURES, render_page, render_tip_display
from src.services.tip_fallback import FALLBACK_TIPS


def loaded(tips, index=0):
    state = session_state.replace_tips(RotationState(), tips)
    return session_state.select(state, index)


class TestRenderPage:
    """Test suite for render_page."""

    def test_loading_indicator(self):
        html = render_page(RotationState(), LedgerState())

        assert "Loading market data..." in html
        assert 'class="tip-card' not in html

    def test_no_tips_message(self):
        html = render_page(loaded([]), LedgerState())
        assert "No tips available at the moment." in html

    def test_current_tip_card(self):
        html = render_page(loaded(FALLBACK_TIPS, 3), LedgerState())

        assert 'class="tip-card hold"' in html
        assert "NVDA" in html
        assert "Confidence: Medium" in html
        assert "Tip 4 of 5" in html
        assert html.count('class="dot') == 5
        assert html.count('class="dot active"') == 1
        assert "selectTip(3)" in html

    def test_price_info_for_live_tips(self):
        tip = TipRecord(
            symbol="AAPL",
            tip="AAPL is up +1.2% today at $150.25. Positive momentum detected.",
            type="BUY",
            confidence="Medium",
            price="150.25",
            change="+1.2%",
        )
        html = render_page(loaded([tip]), LedgerState())

        assert "Current Price: $150.25" in html
        assert '<span class="change">+1.2%</span>' in html
        # A single tip has no navigation
        assert "tip-navigation" not in html

    def test_fallback_tips_have_no_price(self):
        html = render_page(loaded(FALLBACK_TIPS), LedgerState())
        assert "Current Price" not in html

    def test_subscription_form_and_status(self):
        ledger = LedgerState(pending_input="typed@", status_message="❌ Please enter a valid email address.")
        html = render_page(loaded(FALLBACK_TIPS), ledger)

        assert 'value="typed@"' in html
        assert (
            '<div id="status-message" class="message">❌ Please enter a valid email address.</div>'
            in html
        )

    def test_subscriber_list_only_when_non_empty(self):
        assert "subscriber-list" not in render_page(loaded(FALLBACK_TIPS), LedgerState())

        ledger = LedgerState(emails=("a@example.com", "b@example.com"))
        html = render_page(loaded(FALLBACK_TIPS), ledger)

        assert "📊 Subscribers (2)" in html
        assert html.index("a@example.com") < html.index("b@example.com")

    def test_features_are_listed(self):
        html = render_page(loaded(FALLBACK_TIPS), LedgerState())
        for _, title, _ in FEATURES:
            assert title in html

    def test_dynamic_text_is_escaped(self):
        ledger = LedgerState(emails=("<script>x</script>@evil.com",), pending_input='"><b>')
        html = render_page(loaded(FALLBACK_TIPS), ledger)

        assert "<script>x</script>" not in html
        assert "&lt;script&gt;x&lt;/script&gt;@evil.com" in html
        assert 'value="&quot;&gt;&lt;b&gt;"' in html

    def test_periodic_refresh_keeps_typed_email(self):
        assert "setInterval" not in render_page(RotationState(), LedgerState())

        html = render_page(loaded(FALLBACK_TIPS), LedgerState(), refresh_seconds=5)

        # Only the tip section and status text are re-fetched; no full reload
        assert 'http-equiv="refresh"' not in html
        assert "}, 5000);" in html
        assert "refreshTips();" in html
        assert "refreshStatus();" in html
        assert "'/partials/tip-display'" in html
        assert 'id="email"' in html

    def test_tip_display_partial_matches_page(self):
        rotation = loaded(FALLBACK_TIPS, 1)

        section = render_tip_display(rotation)

        assert section.startswith('<section id="tip-display"')
        assert "TSLA" in section
        assert "Tip 2 of 5" in section
        assert 'id="email"' not in section
        assert section in render_page(rotation, LedgerState())

    def test_footer_copyright(self):
        html = render_page(RotationState(), LedgerState())
        assert "&copy; 2024 SoftWork. All rights reserved." in html

    def test_render_is_pure(self):
        rotation = loaded(FALLBACK_TIPS, 2)
        ledger = LedgerState(emails=("a@example.com",))

        assert render_page(rotation, ledger) == render_page(rotation, ledger)
        assert rotation.current_index == 2

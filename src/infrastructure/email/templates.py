import html

WELCOME_SUBJECT = "Welcome to Rhetix 👋"

WELCOME_HTML = """
<div style="font-family: system-ui, -apple-system, sans-serif; max-width: 600px; margin: 0 auto; padding: 24px; color: #111;">
  <h1 style="font-size: 24px; font-weight: 600; color: #000; margin-bottom: 20px;">
    Hey,
  </h1>

  <p style="line-height: 1.6; color: #333; margin-bottom: 16px;">
    Thanks for joining the Rhetix early access.
  </p>

  <p style="line-height: 1.6; color: #333; margin-bottom: 16px;">
    You know that moment when you know exactly what you want to say, but the words just don't come out right? It's frustrating. And that's exactly what Rhetix is here to solve.
  </p>

  <p style="line-height: 1.6; color: #333; margin-bottom: 16px;">
    Before we launch, I have one simple question for you:
  </p>

  <p style="line-height: 1.6; color: #333; margin-bottom: 20px; font-weight: 600; font-size: 16px;">
    What makes communication hard for you right now?
  </p>

  <p style="line-height: 1.6; color: #333; margin-bottom: 20px;">
    Reply directly to this email. I read everything personally and your feedback will directly shape the product.
  </p>

  <p style="line-height: 1.6; color: #333; margin-top: 32px;">
    Talk soon,<br>
    <strong>MK</strong><br>
    <span style="color: #666;">Founder of Rhetix</span>
  </p>

  <p style="margin-top: 32px; padding-top: 16px; border-top: 1px solid #eee; color: #999; font-size: 12px; line-height: 1.5;">
    P.S. If this landed in spam, mark it as "Not Spam" so you don't miss future updates.
  </p>

  <div style="margin-top: 40px; padding-top: 20px; border-top: 1px solid #eee; color: #999; font-size: 12px; text-align: center;">
    <p>Rhetix: AI-powered communication assistant</p>
    <p>This message was sent to {email} because you signed up for early access at rhetix.com</p>
  </div>
</div>
"""

WELCOME_TEXT = """Hey,

Thanks for joining the Rhetix early access list.

If you're here, it's probably because you have ideas, but sometimes the words don't come out the way you want.

You're not alone, and that's exactly what Rhetix is built for.

Before we launch, I'd love to know one thing:
What's your biggest challenge when it comes to speaking or writing better?

Just reply to this email. I read everything.

Talk soon,
MK
Founder, Rhetix

This message was sent to {email}."""

def render_welcome(email: str) -> dict:
    """Build subject, html and text for the welcome email"""
    return {
        "subject": WELCOME_SUBJECT,
        "html": WELCOME_HTML.format(email=html.escape(email)),
        "text": WELCOME_TEXT.format(email=email),
    }

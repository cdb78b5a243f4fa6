import pytest

from mailcanvas.blocks import (
    ButtonBlock,
    ButtonContent,
    DividerBlock,
    DividerContent,
    EmailDocument,
    FooterBlock,
    FooterContent,
    HeaderBlock,
    HeaderContent,
    HeroBlock,
    HeroContent,
    ImageBlock,
    ImageContent,
    SocialLink,
    TextBlock,
    TextContent,
)
from mailcanvas.common.utils.config import get_config, set_config


@pytest.fixture
def simple_document() -> EmailDocument:
    return EmailDocument(
        blocks=[
            TextBlock(id="text-1", content=TextContent(text="Hello")),
            ButtonBlock(id="button-1", content=ButtonContent(text="Go", url="https://x")),
        ]
    )


@pytest.fixture
def full_document() -> EmailDocument:
    return EmailDocument(
        subject="Spring Sale",
        preheader="Everything 20% off",
        blocks=[
            HeaderBlock(id="header-1", content=HeaderContent(text="ACME")),
            HeroBlock(id="hero-1", content=HeroContent(headline="Spring Sale", subheadline="This week only")),
            TextBlock(
                id="text-1",
                content=TextContent(text="Read the docs for details", link_text="docs", link_url="https://docs"),
            ),
            ImageBlock(
                id="image-1",
                content=ImageContent(
                    image_url="https://img/x.png",
                    image_alt="Product",
                    image_width=300,
                    caption="Our product",
                    link_url="https://shop",
                ),
            ),
            ButtonBlock(id="button-1", content=ButtonContent(text="Shop now", url="https://shop", button_style="outline")),
            DividerBlock(id="divider-1", content=DividerContent(thickness=2)),
            FooterBlock(
                id="footer-1",
                content=FooterContent(
                    company_name="ACME Inc.",
                    address="1 Main St",
                    unsubscribe_url="https://unsub",
                    privacy_policy_text="Privacy Policy",
                    privacy_policy_url="https://privacy",
                    social_links=[SocialLink(platform="twitter", url="https://twitter.com/acme")],
                ),
            ),
        ],
    )


@pytest.fixture
def override_config():
    """Apply config overrides for one test, then restore the original."""
    original = get_config()

    def apply(**changes):
        set_config(original.model_copy(update=changes))

    yield apply
    set_config(original)

"""HTTP surface for faqnav."""

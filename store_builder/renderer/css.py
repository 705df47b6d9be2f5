"""
CSS de la page boutique : variables :root + styles minimaux des sections.
Mobile-first, largeur max 28rem (équivalent max-w-md).
"""

_DEFAULT_COLORS = {
    "primary":   "rgb(194, 65, 12)",
    "secondary": "rgb(30, 58, 95)",
    "whatsapp":  "rgb(37, 211, 102)",
    "whatsapp_dark": "rgb(18, 140, 126)",
}


def generate_css_variables(theme: dict | None = None) -> str:
    """Bloc :root { … } ; `theme` peut surcharger les couleurs par clé."""
    colors = {**_DEFAULT_COLORS, **(theme or {})}
    return f""":root {{
  --color-primary:       {colors["primary"]};
  --color-secondary:     {colors["secondary"]};
  --color-whatsapp:      {colors["whatsapp"]};
  --color-whatsapp-dark: {colors["whatsapp_dark"]};
  --color-text:       rgb(31, 41, 55);
  --color-text-light: rgb(107, 114, 128);
  --color-bg:         rgb(249, 250, 251);
  --border-radius-md: 12px;
  --border-radius-lg: 20px;
  --shadow-sm: 0 1px 3px rgba(0,0,0,0.06);
  --shadow-lg: 0 12px 28px rgba(0,0,0,0.12);
}}"""


def get_sections_css() -> str:
    """Styles des six types de section + CTA flottant."""
    return """
*{box-sizing:border-box;margin:0;padding:0}
body{font-family:system-ui,sans-serif;background:var(--color-bg);color:var(--color-text);padding-bottom:6rem}
.store-section{max-width:28rem;margin:0 auto;padding:2rem 1rem}
.hero{position:relative;overflow:hidden;background:var(--color-secondary);color:#fff;text-align:center}
.hero__bg{position:absolute;inset:0;opacity:.3}
.hero__bg img{width:100%;height:100%;object-fit:cover}
.hero__content{position:relative;max-width:28rem;margin:0 auto;padding:4rem 1.5rem}
.hero__title{font-size:1.9rem;font-weight:700}
.hero__subtitle{margin-top:.5rem;font-size:1.1rem;opacity:.9}
.hero__cta{display:inline-block;margin-top:1.5rem;background:#fff;color:var(--color-secondary);padding:.75rem 1.5rem;border-radius:999px;font-weight:600;text-decoration:none}
.products__title{font-size:1.25rem;font-weight:600;color:var(--color-secondary);margin-bottom:1rem}
.products__grid{display:grid;gap:1rem}
.products__grid--2col{grid-template-columns:repeat(2,1fr)}
.products__grid--3col{grid-template-columns:repeat(3,1fr)}
.products__empty{text-align:center;padding:3rem 0;color:var(--color-text-light);font-size:.875rem}
.product-card{background:#fff;border-radius:var(--border-radius-md);overflow:hidden;box-shadow:var(--shadow-sm)}
.product-card__media{position:relative;aspect-ratio:3/4;background:#e5e7eb}
.product-card__media img{width:100%;height:100%;object-fit:cover}
.product-card__price{position:absolute;top:.5rem;left:.5rem;background:rgba(255,255,255,.9);padding:.1rem .5rem;border-radius:999px;font-size:.8rem;font-weight:600}
.product-card__body{padding:.75rem}
.product-card__name{font-size:.875rem;font-weight:500;min-height:2.5em}
.product-card__order{display:block;margin-top:.75rem;text-align:center;background:var(--color-whatsapp);color:#fff;border-radius:6px;padding:.4rem;font-size:.75rem;font-weight:700;text-decoration:none}
.cta-box{border-radius:var(--border-radius-lg);padding:1.5rem;text-align:center;background:rgba(30,58,95,.08)}
.cta-box__title{font-size:1.1rem;font-weight:600;color:var(--color-secondary)}
.cta-box__btn{display:inline-block;margin-top:1rem;background:var(--color-whatsapp);color:#fff;padding:.75rem 1.5rem;border-radius:999px;font-weight:600;text-decoration:none}
.text-block{font-size:.875rem;color:var(--color-text-light)}
.text-block--left{text-align:left}
.text-block--center{text-align:center}
.text-block--right{text-align:right}
.banner img{display:block;width:100%;height:auto;border-radius:var(--border-radius-md)}
.features__grid{display:grid;grid-template-columns:1fr;gap:1rem}
.features__item{text-align:center;padding:.75rem;border-radius:8px;background:rgba(0,0,0,.03)}
.features__icon{font-size:1.5rem;margin-bottom:.5rem}
.features__title{font-size:.875rem;font-weight:500;color:var(--color-secondary)}
.features__desc{font-size:.75rem;color:var(--color-text-light);margin-top:.25rem}
.floating-cta{position:fixed;bottom:1rem;left:50%;transform:translateX(-50%);background:var(--color-whatsapp);color:#fff;padding:.75rem 1.5rem;border-radius:999px;box-shadow:var(--shadow-lg);font-weight:500;text-decoration:none}
.floating-cta:hover,.product-card__order:hover,.cta-box__btn:hover{background:var(--color-whatsapp-dark)}
@media (min-width:640px){.features__grid{grid-template-columns:repeat(3,1fr)}}
""".strip()


def generate_page_css(theme: dict | None = None) -> str:
    """CSS complet : variables + sections."""
    return generate_css_variables(theme) + "\n\n" + get_sections_css()

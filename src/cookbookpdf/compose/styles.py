from __future__ import annotations

PAGE_WIDTH = "8.5in"
PAGE_HEIGHT = "11in"
PAGE_PADDING = "0.75in"

_STYLES = f"""
* {{
  margin: 0;
  padding: 0;
  box-sizing: border-box;
}}

body {{
  font-family: 'Georgia', serif;
  color: #2A2722;
  background: #FAF5F1;
}}

.page {{
  width: {PAGE_WIDTH};
  min-height: {PAGE_HEIGHT};
  padding: {PAGE_PADDING};
  page-break-after: always;
  background: #FAF5F1;
}}

.page:last-child {{
  page-break-after: avoid;
}}

/* Cover page */
.cover-page {{
  display: flex;
  flex-direction: column;
  justify-content: center;
  align-items: center;
  text-align: center;
}}

.cover-photo {{
  width: 4in;
  height: 4in;
  object-fit: cover;
  border-radius: 8px;
  margin-bottom: 32px;
}}

.cover-title {{
  font-size: 36px;
  font-weight: bold;
  margin-bottom: 16px;
  color: #2A2722;
}}

.cover-author {{
  font-size: 18px;
  color: #666;
  margin-bottom: 8px;
}}

.cover-year {{
  font-size: 14px;
  color: #999;
}}

/* TOC page */
.toc-page {{
  padding-top: 1in;
}}

.toc-title {{
  font-size: 28px;
  font-weight: bold;
  margin-bottom: 32px;
  text-align: center;
}}

.toc-item {{
  display: flex;
  justify-content: space-between;
  padding: 8px 0;
  border-bottom: 1px dotted #ccc;
}}

.toc-item-title,
.toc-item-page {{
  font-size: 14px;
}}

.toc-item-page {{
  color: #666;
}}

/* Recipe pages */
.recipe-info-page {{
  padding-top: 0.5in;
}}

.recipe-title {{
  font-size: 28px;
  font-weight: bold;
  margin-bottom: 24px;
  color: #2A2722;
}}

.recipe-section-title {{
  font-size: 16px;
  font-weight: bold;
  margin: 24px 0 12px 0;
  color: #F4991B;
  text-transform: uppercase;
  letter-spacing: 1px;
}}

.recipe-list {{
  list-style: none;
  padding: 0;
}}

.recipe-list li {{
  padding: 6px 0;
  font-size: 14px;
  line-height: 1.5;
}}

.recipe-photo-page {{
  display: flex;
  justify-content: center;
  align-items: center;
}}

.recipe-photo {{
  max-width: 100%;
  max-height: 9in;
  object-fit: contain;
  border-radius: 8px;
}}

.recipe-photo-placeholder {{
  width: 100%;
  height: 6in;
  background: #E8E2DC;
  border-radius: 8px;
  display: flex;
  justify-content: center;
  align-items: center;
  color: #999;
  font-size: 18px;
}}

/* Divider page */
.divider-page {{
  display: flex;
  flex-direction: column;
  justify-content: center;
  align-items: center;
  text-align: center;
}}

.divider-title {{
  font-size: 32px;
  font-weight: bold;
  margin-bottom: 16px;
}}

.divider-subtitle {{
  font-size: 18px;
  color: #666;
}}

/* Front matter pages */
.dedication-page, .foreword-page, .story-page, .photo-page {{
  display: flex;
  flex-direction: column;
  justify-content: center;
  align-items: center;
  text-align: center;
}}

.dedication-text, .foreword-text, .story-text {{
  font-size: 18px;
  line-height: 1.8;
  font-style: italic;
  max-width: 5in;
}}

.story-title {{
  font-size: 24px;
  font-weight: bold;
  margin-bottom: 24px;
}}

.photo-page-image {{
  max-width: 100%;
  max-height: 8in;
  object-fit: contain;
  border-radius: 8px;
}}

.photo-caption {{
  margin-top: 16px;
  font-size: 14px;
  color: #666;
  font-style: italic;
}}
"""


def get_styles() -> str:
    return _STYLES

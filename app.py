"""SkyTone — Streamlit entry point.

    uv run streamlit run app.py
"""

from dotenv import load_dotenv

load_dotenv()

from skytone.app import main  # noqa: E402

main()

"""UI strings and SEO copy for each supported locale."""

from typing import Dict

TRANSLATIONS: Dict[str, Dict[str, str]] = {
    "en": {
        "html_lang": "en",
        "site_tagline": "Trending movies & TV shows",
        "nav_home": "Home",
        "nav_movies": "Movies",
        "nav_tv": "TV Shows",
        "language": "Language",
        "search_placeholder": "Search movies or TV shows...",
        "search_button": "Search",
        "trending_movies": "Trending Movies This Week",
        "trending_tv": "Trending TV Shows This Week",
        "popular_movies": "Popular Movies",
        "load_more": "Load more",
        "loading": "Loading...",
        "no_more_items": "No more items",
        "movie_genres": "Movie genres",
        "tv_genres": "TV genres",
        "browse_by_year": "Browse by year",
        "rating": "Rating",
        "release_date": "Release date",
        "first_air_date": "First aired",
        "runtime": "Runtime",
        "minutes": "min",
        "seasons": "Seasons",
        "status": "Status",
        "cast": "Cast",
        "trailer": "Trailer",
        "similar": "You may also like",
        "overview": "Overview",
        "no_overview": "No overview available.",
        "no_image": "No image",
        "search_results_for": "Search results for",
        "no_results": "Nothing found. Try another title.",
        "page_of": "Page {page} of {total}",
        "previous": "Previous",
        "next": "Next",
        "back_to_top": "Back to top",
        "footer_powered": "This product uses the TMDB API but is not endorsed or certified by TMDB.",
        "movie": "Movies",
        "tv": "TV Shows",
        "movie_lower": "movies",
        "tv_lower": "TV shows",
        # Page titles and meta descriptions
        "home_title": "{site} – Trending Movies & TV Shows",
        "home_description": (
            "Discover trending movies and TV shows from around the world. "
            "Trailers, ratings, genres and year-based navigation powered by TMDB."
        ),
        "movie_title": "{title} – Movie Details & Trailer",
        "movie_description": "{title} movie details, rating and trailer.",
        "tv_title": "{title} – TV Show Details & Trailer",
        "tv_description": "{title} TV show details, rating and trailer.",
        "search_title": "Search: {query} – {site}",
        "search_description": 'Search results for "{query}" – movies and TV shows.',
        "genre_title": "{genre} {label} – {site}",
        "genre_description": 'Browse popular {label_lower} in the "{genre}" genre.',
        "year_title": "{label} in {year} – {site}",
        "year_description": "Discover popular {label_lower} released in {year}.",
        # Static trust pages
        "about_title": "About {site}",
        "about_description": (
            "Learn more about {site} – a movie and TV information site powered by TMDB, "
            "built for fast browsing and a clean experience."
        ),
        "about_body": (
            "{site} helps you discover what to watch next. Every page is generated from "
            "public metadata provided by The Movie Database (TMDB). We do not host or "
            "stream any video content."
        ),
        "privacy_title": "Privacy Policy – {site}",
        "privacy_description": (
            "Read how {site} collects, uses and protects your personal information and "
            "cookies while you browse this website."
        ),
        "privacy_body": (
            "We store a single cookie, lang_preference, to remember your language. We do "
            "not sell personal data. Third-party images are loaded from TMDB servers."
        ),
        "terms_title": "Terms of Use – {site}",
        "terms_description": (
            "Review the terms and conditions that apply when using the {site} website "
            "and its features."
        ),
        "terms_body": (
            "Content on {site} is provided for information only, as is, without warranty. "
            "Movie and TV metadata belongs to its respective owners."
        ),
        "dmca_title": "DMCA / Copyright Policy – {site}",
        "dmca_description": (
            "DMCA notice and copyright policy for {site}, including how to submit "
            "takedown requests."
        ),
        "dmca_body": (
            "{site} does not host copyrighted media. If you believe a page infringes your "
            "rights, contact us with the URL and proof of ownership and we will respond promptly."
        ),
        "contact_title": "Contact – {site}",
        "contact_description": (
            "Get in touch with the {site} team for feedback, advertising inquiries, or "
            "DMCA notices."
        ),
        "contact_body": "Send feedback, advertising inquiries or DMCA notices through the channels listed on this page.",
    },
    "id": {
        "html_lang": "id",
        "site_tagline": "Film & acara TV yang sedang tren",
        "nav_home": "Beranda",
        "nav_movies": "Film",
        "nav_tv": "Acara TV",
        "language": "Bahasa",
        "search_placeholder": "Cari film atau acara TV...",
        "search_button": "Cari",
        "trending_movies": "Film Trending Minggu Ini",
        "trending_tv": "Acara TV Trending Minggu Ini",
        "popular_movies": "Film Populer",
        "load_more": "Muat lebih banyak",
        "loading": "Memuat...",
        "no_more_items": "Tidak ada lagi",
        "movie_genres": "Genre film",
        "tv_genres": "Genre acara TV",
        "browse_by_year": "Jelajahi per tahun",
        "rating": "Rating",
        "release_date": "Tanggal rilis",
        "first_air_date": "Tayang perdana",
        "runtime": "Durasi",
        "minutes": "menit",
        "seasons": "Musim",
        "status": "Status",
        "cast": "Pemeran",
        "trailer": "Trailer",
        "similar": "Mungkin kamu juga suka",
        "overview": "Sinopsis",
        "no_overview": "Sinopsis belum tersedia.",
        "no_image": "Tidak ada gambar",
        "search_results_for": "Hasil pencarian untuk",
        "no_results": "Tidak ditemukan. Coba judul lain.",
        "page_of": "Halaman {page} dari {total}",
        "previous": "Sebelumnya",
        "next": "Berikutnya",
        "back_to_top": "Kembali ke atas",
        "footer_powered": "Produk ini menggunakan API TMDB tetapi tidak didukung atau disertifikasi oleh TMDB.",
        "movie": "Film",
        "tv": "Acara TV",
        "movie_lower": "film",
        "tv_lower": "acara TV",
        "home_title": "{site} – Film & Acara TV Trending",
        "home_description": (
            "Temukan film dan acara TV yang sedang tren dari seluruh dunia. "
            "Trailer, rating, genre dan navigasi per tahun dari TMDB."
        ),
        "movie_title": "{title} – Detail Film & Trailer",
        "movie_description": "Detail film {title}, rating dan trailer.",
        "tv_title": "{title} – Detail Acara TV & Trailer",
        "tv_description": "Detail acara TV {title}, rating dan trailer.",
        "search_title": "Cari: {query} – {site}",
        "search_description": 'Hasil pencarian "{query}" – film dan acara TV.',
        "genre_title": "{label} {genre} – {site}",
        "genre_description": 'Jelajahi {label_lower} populer bergenre "{genre}".',
        "year_title": "{label} tahun {year} – {site}",
        "year_description": "Temukan {label_lower} populer yang rilis tahun {year}.",
        "about_title": "Tentang {site}",
        "about_description": (
            "Kenali {site} – situs informasi film dan acara TV dari TMDB, dibuat untuk "
            "penjelajahan yang cepat dan bersih."
        ),
        "about_body": (
            "{site} membantu kamu menemukan tontonan berikutnya. Setiap halaman dibuat dari "
            "metadata publik The Movie Database (TMDB). Kami tidak menyimpan atau menayangkan video."
        ),
        "privacy_title": "Kebijakan Privasi – {site}",
        "privacy_description": (
            "Baca bagaimana {site} mengumpulkan, menggunakan dan melindungi informasi "
            "pribadi serta cookie saat kamu menjelajah."
        ),
        "privacy_body": (
            "Kami hanya menyimpan satu cookie, lang_preference, untuk mengingat bahasa pilihanmu. "
            "Kami tidak menjual data pribadi. Gambar dimuat dari server TMDB."
        ),
        "terms_title": "Syarat Penggunaan – {site}",
        "terms_description": "Tinjau syarat dan ketentuan penggunaan situs {site} beserta fiturnya.",
        "terms_body": (
            "Konten di {site} disediakan hanya sebagai informasi, apa adanya, tanpa jaminan. "
            "Metadata film dan acara TV adalah milik pemiliknya masing-masing."
        ),
        "dmca_title": "DMCA / Kebijakan Hak Cipta – {site}",
        "dmca_description": (
            "Pemberitahuan DMCA dan kebijakan hak cipta {site}, termasuk cara mengajukan "
            "permintaan penghapusan."
        ),
        "dmca_body": (
            "{site} tidak menyimpan media berhak cipta. Jika sebuah halaman melanggar hakmu, "
            "hubungi kami dengan URL dan bukti kepemilikan."
        ),
        "contact_title": "Kontak – {site}",
        "contact_description": (
            "Hubungi tim {site} untuk masukan, kerja sama iklan, atau pemberitahuan DMCA."
        ),
        "contact_body": "Kirim masukan, pertanyaan iklan atau pemberitahuan DMCA melalui kanal yang tercantum di halaman ini.",
    },
}


def get_translations(locale: str) -> Dict[str, str]:
    """All UI strings for a locale, falling back to English."""
    return TRANSLATIONS.get(locale, TRANSLATIONS["en"])


def translate(locale: str, key: str, **kwargs) -> str:
    """Look up a string and fill in its placeholders."""
    strings = get_translations(locale)
    text = strings.get(key) or TRANSLATIONS["en"].get(key, key)
    return text.format(**kwargs) if kwargs else text

"""Bundled demo corpus (King James Version, public domain).

A handful of well-known passages in the seed corpus format, enough to
exercise chapter, verse and range lookups without shipping a full Bible.
"""

from __future__ import annotations


def _chapter(number: int, *texts: str) -> dict:
    return {
        "chapter": number,
        "verses": [{"verse": i, "text": text} for i, text in enumerate(texts, start=1)],
    }


DEMO_CORPUS: list[dict] = [
    {
        "book": "Genesis",
        "chapters": [
            _chapter(
                1,
                "In the beginning God created the heaven and the earth.",
                "And the earth was without form, and void; and darkness was upon "
                "the face of the deep. And the Spirit of God moved upon the face "
                "of the waters.",
                "And God said, Let there be light: and there was light.",
            ),
        ],
    },
    {
        "book": "Psalms",
        "chapters": [
            _chapter(
                23,
                "The LORD is my shepherd; I shall not want.",
                "He maketh me to lie down in green pastures: he leadeth me beside "
                "the still waters.",
                "He restoreth my soul: he leadeth me in the paths of righteousness "
                "for his name's sake.",
                "Yea, though I walk through the valley of the shadow of death, I "
                "will fear no evil: for thou art with me; thy rod and thy staff "
                "they comfort me.",
                "Thou preparest a table before me in the presence of mine enemies: "
                "thou anointest my head with oil; my cup runneth over.",
                "Surely goodness and mercy shall follow me all the days of my life: "
                "and I will dwell in the house of the LORD for ever.",
            ),
        ],
    },
    {
        "book": "Song of Solomon",
        "chapters": [
            {
                "chapter": 2,
                "verses": [
                    {
                        "verse": 1,
                        "text": "I am the rose of Sharon, and the lily of the valleys.",
                    },
                ],
            },
        ],
    },
    {
        "book": "John",
        "chapters": [
            _chapter(
                3,
                "There was a man of the Pharisees, named Nicodemus, a ruler of the "
                "Jews:",
                "The same came to Jesus by night, and said unto him, Rabbi, we know "
                "that thou art a teacher come from God: for no man can do these "
                "miracles that thou doest, except God be with him.",
                "Jesus answered and said unto him, Verily, verily, I say unto thee, "
                "Except a man be born again, he cannot see the kingdom of God.",
                "Nicodemus saith unto him, How can a man be born when he is old? "
                "can he enter the second time into his mother's womb, and be born?",
                "Jesus answered, Verily, verily, I say unto thee, Except a man be "
                "born of water and of the Spirit, he cannot enter into the kingdom "
                "of God.",
                "That which is born of the flesh is flesh; and that which is born "
                "of the Spirit is spirit.",
                "Marvel not that I said unto thee, Ye must be born again.",
                "The wind bloweth where it listeth, and thou hearest the sound "
                "thereof, but canst not tell whence it cometh, and whither it "
                "goeth: so is every one that is born of the Spirit.",
                "Nicodemus answered and said unto him, How can these things be?",
                "Jesus answered and said unto him, Art thou a master of Israel, "
                "and knowest not these things?",
                "Verily, verily, I say unto thee, We speak that we do know, and "
                "testify that we have seen; and ye receive not our witness.",
                "If I have told you earthly things, and ye believe not, how shall "
                "ye believe, if I tell you of heavenly things?",
                "And no man hath ascended up to heaven, but he that came down from "
                "heaven, even the Son of man which is in heaven.",
                "And as Moses lifted up the serpent in the wilderness, even so "
                "must the Son of man be lifted up:",
                "That whosoever believeth in him should not perish, but have "
                "eternal life.",
                "For God so loved the world, that he gave his only begotten Son, "
                "that whosoever believeth in him should not perish, but have "
                "everlasting life.",
                "For God sent not his Son into the world to condemn the world; but "
                "that the world through him might be saved.",
                "He that believeth on him is not condemned: but he that believeth "
                "not is condemned already, because he hath not believed in the "
                "name of the only begotten Son of God.",
                "And this is the condemnation, that light is come into the world, "
                "and men loved darkness rather than light, because their deeds "
                "were evil.",
                "For every one that doeth evil hateth the light, neither cometh to "
                "the light, lest his deeds should be reproved.",
                "But he that doeth truth cometh to the light, that his deeds may "
                "be made manifest, that they are wrought in God.",
            ),
        ],
    },
    {
        "book": "1 Corinthians",
        "chapters": [
            _chapter(
                13,
                "Though I speak with the tongues of men and of angels, and have "
                "not charity, I am become as sounding brass, or a tinkling cymbal.",
                "And though I have the gift of prophecy, and understand all "
                "mysteries, and all knowledge; and though I have all faith, so "
                "that I could remove mountains, and have not charity, I am nothing.",
                "And though I bestow all my goods to feed the poor, and though I "
                "give my body to be burned, and have not charity, it profiteth me "
                "nothing.",
                "Charity suffereth long, and is kind; charity envieth not; charity "
                "vaunteth not itself, is not puffed up,",
            ),
        ],
    },
    {
        "book": "1 John",
        "chapters": [
            _chapter(
                1,
                "That which was from the beginning, which we have heard, which we "
                "have seen with our eyes, which we have looked upon, and our hands "
                "have handled, of the Word of life;",
                "(For the life was manifested, and we have seen it, and bear "
                "witness, and shew unto you that eternal life, which was with the "
                "Father, and was manifested unto us;)",
                "That which we have seen and heard declare we unto you, that ye "
                "also may have fellowship with us: and truly our fellowship is "
                "with the Father, and with his Son Jesus Christ.",
                "And these things write we unto you, that your joy may be full.",
                "This then is the message which we have heard of him, and declare "
                "unto you, that God is light, and in him is no darkness at all.",
            ),
        ],
    },
    {
        "book": "2 John",
        "chapters": [
            _chapter(
                1,
                "The elder unto the elect lady and her children, whom I love in the "
                "truth; and not I only, but also all they that have known the truth;",
                "For the truth's sake, which dwelleth in us, and shall be with us "
                "for ever.",
                "Grace be with you, mercy, and peace, from God the Father, and from "
                "the Lord Jesus Christ, the Son of the Father, in truth and love.",
            ),
        ],
    },
]


def demo_verse_count() -> int:
    """Total number of verses in the demo corpus."""
    return sum(
        len(chapter["verses"]) for book in DEMO_CORPUS for chapter in book["chapters"]
    )

"""Keyword tables and pre-authored paragraphs for the chat responder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, Mapping, Tuple


@dataclass(frozen=True)
class Reply:
    response: str
    suggestions: Tuple[str, str, str]


# Ordered so that full names are listed before their short aliases.
PLAYER_ALIASES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("jordan", ("michael jordan", "jordan")),
    ("lebron", ("lebron james", "lebron", "king james")),
    ("kobe", ("kobe bryant", "kobe", "black mamba")),
    ("magic", ("magic johnson", "magic")),
    ("bird", ("larry bird", "bird")),
    ("shaq", ("shaquille o'neal", "shaquille", "shaq")),
    ("duncan", ("tim duncan", "duncan")),
    ("kareem", ("kareem abdul-jabbar", "kareem")),
    ("wilt", ("wilt chamberlain", "wilt")),
    ("russell", ("bill russell", "russell")),
)

DISPLAY_NAMES: Mapping[str, str] = {
    "lebron": "LeBron",
    "shaq": "Shaq",
}

STATS_KEYWORDS = ("points", "ppg", "rebounds", "assists", "shooting", "efficiency", "stats", "averages", "numbers")
CAREER_KEYWORDS = ("career", "achievements", "championships", "titles", "legacy", "impact", "rings")
STYLE_KEYWORDS = ("style", "playstyle", "skill", "technique", "approach", "game")
CURRENT_KEYWORDS = ("current", "today", "nowadays", "this season", "modern", "right now")
COMPARISON_KEYWORDS = ("better", "compare", "comparison", "versus", " vs", "who is", "who was", "head to head")

# Checked in this order for single-player replies.
INTENT_KEYWORDS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("stats", STATS_KEYWORDS),
    ("career", CAREER_KEYWORDS),
    ("style", STYLE_KEYWORDS),
    ("current", CURRENT_KEYWORDS),
)


RIVALRIES: Dict[FrozenSet[str], Reply] = {
    frozenset({"jordan", "lebron"}): Reply(
        "Jordan vs LeBron is the defining debate of modern basketball. Jordan went 6-0 in the Finals "
        "with six Finals MVPs, ten scoring titles and a Defensive Player of the Year award, a peak of "
        "two-way dominance nobody has matched. LeBron answers with longevity and totality: the all-time "
        "scoring record, four titles with three different franchises and two decades of elite play. "
        "If you value an untouchable peak, Jordan is your pick; if you value sustained greatness across "
        "eras, LeBron has the stronger résumé.",
        ("Jordan's Finals record vs LeBron's", "Who had the better peak season?", "How much does longevity matter?"),
    ),
    frozenset({"magic", "bird"}): Reply(
        "Magic and Bird saved the NBA. Their rivalry started in the 1979 NCAA final and carried straight "
        "into the league, where the Lakers and Celtics met three times in the Finals during the 80s. "
        "Magic ran Showtime with 11.2 assists a night and five rings; Bird won three straight MVPs as "
        "the ultimate shooter and trash talker. Magic holds the edge in titles, Bird in individual "
        "accolades over a short stretch, and the league owes its television era to both.",
        ("Lakers vs Celtics in the 80s", "Bird's three straight MVPs", "Magic's Showtime offense"),
    ),
    frozenset({"jordan", "kobe"}): Reply(
        "Kobe built his game in Jordan's image: the footwork, the fadeaway, the killer mentality. "
        "Jordan was the more efficient scorer at 30.1 points on 49.7% shooting and never lost in the "
        "Finals, while Kobe played twenty seasons with one franchise, won five titles and scored 81 in "
        "a single game. Jordan is the original, Kobe the most faithful student the game has seen.",
        ("Kobe's 81-point game", "Jordan's six titles", "Whose fadeaway was better?"),
    ),
    frozenset({"kobe", "shaq"}): Reply(
        "Shaq and Kobe were the most dominant duo of their era, winning three straight titles from 2000 "
        "to 2002. Shaq was an unstoppable force inside and took all three Finals MVPs, while a young Kobe "
        "grew into the closer. Their feud broke the partnership up in 2004, and both went on to win "
        "again elsewhere: Shaq with Miami, Kobe twice more in Los Angeles.",
        ("Shaq's three-peat Finals MVPs", "What split Shaq and Kobe?", "Kobe's titles without Shaq"),
    ),
    frozenset({"wilt", "russell"}): Reply(
        "Wilt vs Russell is the original rivalry. Chamberlain owned the record book with 100 points in a "
        "game and 50.4 points per game for a season, while Russell owned the trophy case with eleven "
        "championships in thirteen seasons. Their head-to-head meetings usually ended with Wilt winning "
        "the box score and Russell winning the series.",
        ("Wilt's 100-point game", "Russell's eleven rings", "Stats vs winning"),
    ),
}

MULTI_PLAYER_FALLBACK = Reply(
    "Great comparison between {names}! Each of these legends brought something different to the game. "
    "Comparing greats across eras shows how basketball evolved and how many paths there are to "
    "greatness. Which specific part of their games would you like to compare?",
    ("Compare their scoring", "Compare their championships", "Who had the better peak?"),
)


PLAYER_PROFILES: Dict[str, Dict[str, str]] = {
    "jordan": {
        "stats": (
            "Jordan averaged 30.1 points, 6.2 rebounds and 5.3 assists on 49.7% shooting across 1,072 "
            "games, the highest career scoring average in NBA history. He led the league in scoring ten "
            "times and paired it with a Defensive Player of the Year award."
        ),
        "career": (
            "Jordan's career reads like a checklist of greatness: six championships in six Finals trips, "
            "six Finals MVPs, five MVPs and fourteen All-Star selections. Two separate three-peats with "
            "the Bulls cemented him as the standard every guard is measured against."
        ),
        "style": (
            "Jordan combined explosive athleticism early in his career with a lethal fadeaway later on. "
            "He attacked the rim relentlessly, defended the other team's best scorer and was at his most "
            "dangerous in the final minutes."
        ),
        "default": (
            "Michael Jordan is the benchmark for NBA greatness. His competitiveness, scoring and perfect "
            "Finals record made him a global icon. What part of his game would you like to dig into?"
        ),
    },
    "lebron": {
        "stats": (
            "LeBron has averaged 27.2 points, 7.5 rebounds and 7.3 assists over more than 1,400 games, "
            "a blend of volume and versatility no one else has sustained. He is the league's all-time "
            "leading scorer and sits near the top of the all-time assists list."
        ),
        "career": (
            "LeBron has four championships with three franchises, four Finals MVPs, four MVPs and a "
            "record number of All-Star selections. His 2016 comeback from 3-1 down against a 73-win team "
            "is one of the great Finals performances."
        ),
        "style": (
            "LeBron plays like a point guard in a power forward's body. He reads the floor like a "
            "quarterback, bulldozes to the rim in transition and can guard all five positions when it "
            "matters."
        ),
        "current": (
            "Even after more than twenty seasons, LeBron is still producing at an All-NBA level. "
            "No player has stayed this good for this long, and every season adds to the longevity "
            "records."
        ),
        "default": (
            "LeBron James is the most complete player of his generation, with a rare mix of size, vision "
            "and durability. What would you like to know about the King?"
        ),
    },
    "kobe": {
        "stats": (
            "Kobe averaged 25.0 points over twenty seasons and 1,346 games, all with the Lakers. He "
            "finished his career fourth on the all-time scoring list and once dropped 81 points in a "
            "single game."
        ),
        "career": (
            "Kobe won five championships, two Finals MVPs and the 2008 MVP, and made eighteen All-Star "
            "teams. He is the only player to spend a twenty-year career entirely with the Lakers."
        ),
        "style": (
            "Kobe's game was built on footwork, tough shot-making and an obsessive work ethic he called "
            "the Mamba Mentality. He was comfortable taking, and making, the hardest shot on the floor."
        ),
        "default": (
            "Kobe Bryant was the purest scorer of the post-Jordan era and a symbol of relentless "
            "preparation. What part of the Black Mamba's career interests you?"
        ),
    },
    "magic": {
        "stats": (
            "Magic averaged 19.5 points, 7.2 rebounds and 11.2 assists on 52.0% shooting. At 6'9\" he "
            "remains the tallest elite point guard the game has produced and one of its best passers."
        ),
        "career": (
            "Magic won five championships, three MVPs and three Finals MVPs, including the 1980 Finals "
            "MVP as a rookie when he started at center in the clinching game."
        ),
        "default": (
            "Magic Johnson turned the point guard position into a show. The Showtime Lakers ran, passed "
            "and won like nobody before them. What would you like to know about Magic?"
        ),
    },
    "bird": {
        "stats": (
            "Bird averaged 24.3 points, 10.0 rebounds and 6.3 assists while shooting 88.6% from the line "
            "and 37.6% from three in an era when few players even tried the shot."
        ),
        "career": (
            "Bird won three championships, two Finals MVPs and three consecutive MVP awards from 1984 to "
            "1986, a feat matched only by Wilt Chamberlain and Bill Russell."
        ),
        "default": (
            "Larry Bird was a master of skill and basketball IQ, and one of the fiercest competitors the "
            "Celtics ever had. What about Larry Legend interests you?"
        ),
    },
    "shaq": {
        "stats": (
            "Shaq averaged 23.7 points and 10.9 rebounds on 58.2% shooting. His free throw percentage of "
            "52.7% was the one weakness, and opponents built the Hack-a-Shaq strategy around it."
        ),
        "career": (
            "Shaq won four championships, three Finals MVPs in a row from 2000 to 2002 and the 2000 MVP "
            "award, and made fifteen All-Star teams across six franchises."
        ),
        "style": (
            "Shaq played with a combination of size, power and agility that no center has matched. At "
            "7'1\" and over 300 pounds he could still run the floor and finish above the rim."
        ),
        "default": (
            "Shaquille O'Neal was the most physically dominant force of his era. What would you like to "
            "know about the Diesel?"
        ),
    },
}

GENERIC_PLAYER_TEMPLATES: Mapping[str, str] = {
    "stats": (
        "{name} was incredible statistically. Looking at their career numbers, they consistently "
        "dominated in multiple categories. Their efficiency and consistency over their career truly set "
        "them apart from their peers."
    ),
    "career": (
        "{name} had an absolutely legendary career. Their combination of individual excellence, team "
        "success, and cultural impact makes them one of the all-time greats. The championships, MVPs, and "
        "memorable moments really tell the story."
    ),
    "default": (
        "{name} is definitely one of the NBA legends worth discussing! They brought a unique combination "
        "of skill, athleticism, and basketball IQ that made them special. What specific aspect of their "
        "game interests you most?"
    ),
}

PLAYER_SUGGESTIONS: Mapping[str, Tuple[str, str, str]] = {
    "jordan": ("What made Jordan clutch?", "Jordan vs LeBron comparison", "MJ's impact on basketball culture"),
    "lebron": ("LeBron's longevity secrets", "King James' Finals record", "LeBron's all-around game"),
    "kobe": ("Kobe's Mamba Mentality", "Kobe vs Jordan similarities", "Black Mamba's work ethic"),
    "magic": ("Magic vs Bird rivalry", "The Showtime Lakers", "Magic's rookie Finals"),
    "bird": ("Bird vs Magic rivalry", "Bird's three straight MVPs", "Best shooters of the 80s"),
    "shaq": ("Shaq and Kobe's three-peat", "Most dominant centers ever", "Shaq's free throw struggles"),
}

GENERIC_PLAYER_SUGGESTIONS = ("Compare different playing styles", "Greatest clutch performers", "Most complete players ever")


# Secondary keyword dispatch; the first entry doubles as the default.
CURRENT_ERA_REPLIES: Tuple[Tuple[Tuple[str, ...], Reply], ...] = (
    (
        ("mvp",),
        Reply(
            "The modern MVP race is driven by historic efficiency. Big men who run the offense, like "
            "Nikola Jokić and Giannis Antetokounmpo, have collected multiple awards, while high-volume "
            "guards such as Shai Gilgeous-Alexander have pushed scoring efficiency to new levels.",
            ("How is the MVP voted on?", "Best MVP seasons ever", "Jokić vs Giannis"),
        ),
    ),
    (
        ("record",),
        Reply(
            "Records keep falling in today's game. Three-point volume sets new highs almost every season, "
            "team scoring averages are the highest since the 60s, and LeBron has taken over the all-time "
            "points record from Kareem.",
            ("Which records will never fall?", "Wilt's 100-point game", "How the three-pointer changed scoring"),
        ),
    ),
    (
        ("championship", "title", "finals", "contender"),
        Reply(
            "Parity defines the current championship picture. The league has seen a different champion "
            "almost every year recently, with deep, balanced rosters and two-way wings proving more "
            "valuable than a single superstar.",
            ("Greatest dynasties ever", "What makes a championship team?", "Best Finals performances"),
        ),
    ),
)

COMPARISON_REPLY = Reply(
    "NBA comparisons are always fascinating! When comparing legends, I like to consider multiple factors: "
    "statistical dominance, team success, era context, impact on the game, and cultural influence. Each "
    "great player excelled in different ways - some through raw numbers, others through intangibles like "
    "leadership and clutch performance. What specific comparison interests you?",
    ("Who was more dominant: Shaq or Kareem?", "Compare Magic and Bird's rivalry", "LeBron vs Jordan debate"),
)

STATS_REPLY = Reply(
    "NBA statistics tell incredible stories! The beauty of basketball stats is how they reveal different "
    "playing styles and eras. Points per game shows scoring ability, but efficiency metrics like true "
    "shooting percentage give deeper insight. Rebounds and assists show impact beyond scoring. Context "
    "matters too - pace of play, rule changes, and competition level all affect numbers.",
    ("What makes a great shooting percentage?", "Why are rebounds important?", "Assist vs turnover ratio"),
)

FALLBACK_VARIANTS: Tuple[Tuple[Tuple[str, ...], Reply], ...] = (
    (
        ("goat", "greatest"),
        Reply(
            "The GOAT debate is eternal! Different fans value different things - some prioritize "
            "championships, others focus on individual dominance, longevity, or cultural impact. Michael "
            "Jordan, LeBron James, Kareem Abdul-Jabbar, and others all have compelling cases. What factors "
            "do you think matter most in determining greatness?",
            ("Jordan's case for GOAT", "LeBron's case for GOAT", "Is Kareem underrated?"),
        ),
    ),
    (
        ("era", "90s", "80s"),
        Reply(
            "Different NBA eras had unique characteristics! The 80s featured fast-paced, physical play with "
            "legendary rivalries. The 90s saw the peak of individual superstars and global expansion. The "
            "2000s brought defensive focus, while the modern era emphasizes spacing and analytics. Each era "
            "had its own style and legends.",
            ("What defined the 90s NBA?", "Best team of the 80s", "Modern vs vintage basketball"),
        ),
    ),
    (
        ("favorite", "favourite"),
        Reply(
            "Everyone's favorite legend says something about what they love in the game. Some fans fall "
            "for Magic's passing, others for Jordan's competitiveness or Shaq's sheer power. Tell me who "
            "yours is and I can share their numbers and best moments.",
            ("Tell me about Magic Johnson", "Tell me about Larry Bird", "Tell me about Kobe Bryant"),
        ),
    ),
)

FALLBACK_REPLY = Reply(
    "I love talking NBA! Whether it's about legendary players, epic games, statistical comparisons, or "
    "basketball strategy, there's always something fascinating to discuss. The NBA has such a rich history "
    "of incredible athletes and memorable moments. What aspect of basketball interests you most?",
    ("Tell me about the Dream Team", "What defined the 90s NBA?", "Modern vs vintage basketball"),
)

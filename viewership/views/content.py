"""
Static copy shown on the dashboard.  No backend interaction.
"""

TITLE    = "Will Henderson | College Football Viewership Model"
SUBTITLE = "Predict hypothetical TV audiences using a trained statistical model."

COMP_GAMES_HELP = (
    "A \"major competing game\" is another nationally relevant, high-profile "
    "matchup airing in the same time window that could pull viewers away "
    "from your game."
)

BRANDS_INTRO = (
    "These rankings use Nielsen viewership data and supporting metadata from "
    "over 2,000 college football games since 2018. Lift % shows how much a "
    "team increases expected TV viewership, compared to a neutral baseline "
    "team, independent of structural variables like network, time slot, "
    "opponent, rankings, and competing games."
)

LIFT_EXPLAINER = (
    "**What is Lift %?**  \n"
    "Lift % measures a team's intrinsic drawing power on national television. "
    "The model controls for network, time slot, rankings, rivalry status, "
    "competitiveness, and competing games, isolating only the brand effect. "
    "A Lift % of +150%, for example, means adding that team to a neutral "
    "baseline matchup would be expected to increase viewership by 150% "
    "(i.e., multiply the audience by 2.5x). Higher Lift % values represent "
    "stronger national brands that consistently attract larger TV audiences."
)

MODEL_EXPLANATION = [
    "This viewership model uses several years of college football TV ratings "
    "to estimate how many people would watch a hypothetical matchup.",

    "Certain factors consistently influence TV audiences: team brand power, "
    "rankings, network, time slot, rivalry status, and the quality of "
    "competing games at the same time. The model learns how much each of "
    "these variables has historically moved viewership up or down.",

    "It uses a log-transformed regression, which stabilizes variance and "
    "makes predictions more reliable. A prediction made in log space is "
    "then passed through a \"smearing\" correction so the numbers match "
    "real-world viewer counts.",

    "Rankings and conferences quantify team quality. Network indicators "
    "represent the impact of national TV exposure. Time-slot flags (e.g., "
    "Primetime, Friday, Saturday Early) capture when people tend to watch "
    "more or less football. Rivalry indicators flag the major viewership "
    "spikes that don't depend on record.",

    "Finally, the model calculates a confidence interval, giving an upper "
    "and lower range that shows the uncertainty around each prediction.",
]

FOOTER = "Created by **Will Henderson** · wshenderson7@gmail.com · 𝕏 @willshenderson7"

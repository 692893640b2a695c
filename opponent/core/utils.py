import logging


def log_search_info(log: logging.Logger, tier, depth, move, score, nodes, elapsed, randomized=False):
    """One line per selection; random picks go out at INFO, searches at DEBUG."""
    nps = int(nodes / elapsed) if elapsed > 0 else 0
    move_str = move.uci() if move else "-"
    score_str = "random" if randomized else f"cp {score}"
    log.log(
        logging.INFO if randomized else logging.DEBUG,
        "info tier %s depth %d score %s nodes %d nps %d time %d move %s",
        tier, depth, score_str, nodes, nps, int(elapsed * 1000), move_str,
    )

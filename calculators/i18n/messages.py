"""
Message catalogues for calculator feedback and affiliate cards.

Keyed by locale, then namespace, then message key. Placeholders use
str.format syntax and are filled from the params the scorers pass.
"""

from typing import Dict

Catalog = Dict[str, Dict[str, str]]

EN: Catalog = {
    "CalculatorFeedback": {
        "citizenship": "EU/EEA citizens do not need a digital nomad visa. You can move to Italy under freedom of movement.",
        "employerLocation": "Your employer or clients must be based outside Italy. Working for an Italian company is not covered by this visa.",
        "criminalRecord": "A criminal conviction in the last 5 years is an automatic refusal ground. Speak to an immigration lawyer before applying.",
        "workProof": "You have no proof of your remote work relationship (employment contract or client agreements).",
        "qualification": "Without a degree or equivalent experience you do not qualify as a highly skilled worker.",
        "remoteExp": "At least 6 months of prior remote work experience is required.",
        "contractGap": "Your contract or client agreements do not cover the full 12 months of the permit.",
        "incomeLow": "Your income (€{income}) is below the required threshold (€{threshold}).",
        "dependantsPenalty": "Each of your {count} dependant(s) raises the income you must prove.",
        "bankStatements6m": "Only 6 months of income documentation. Consulates usually expect 12 months.",
        "bankStatementsLess": "Less than 6 months of income documentation is a frequent refusal reason.",
        "transitory": "Transitory accommodation may be accepted, but you will need a lease before registering your residence.",
        "airbnb": "Short-term rentals are not accepted as proof of accommodation.",
        "insurance": "You need health insurance with at least €30,000 coverage valid in Italy.",
        "passport": "Your passport should be valid for at least 15 months (permit duration plus 3 months).",
    },
    "AffiliateActions": {
        "legalTitle": "Talk to an immigration lawyer",
        "legalDesc": "Get a confidential assessment of your criminal record before you apply.",
        "legalBtn": "Book a consultation",
        "contractReviewTitle": "Get your work documents reviewed",
        "contractReviewDesc": "A lawyer checks that your contract proves a valid remote work relationship.",
        "contractReviewBtn": "Review my contract",
        "contractDraftTitle": "Extend your contract to 12 months",
        "contractDraftDesc": "Have a compliant 12-month contract or client agreement drafted.",
        "contractDraftBtn": "Draft my contract",
        "qualCheckTitle": "Check your qualification",
        "qualCheckDesc": "Request a CIMEA statement of comparability for your degree.",
        "qualCheckBtn": "Start the check",
        "cvHelpTitle": "Document your remote experience",
        "cvHelpDesc": "Turn your work history into evidence a consulate will accept.",
        "cvHelpBtn": "Improve my CV",
        "financeTitle": "Plan your income with an accountant",
        "financeDesc": "Find out how to reach the income threshold with your current setup.",
        "financeBtn": "Talk to an accountant",
        "docPrepTitle": "Prepare your financial documents",
        "docPrepDesc": "Get help assembling bank statements and tax returns the consulate accepts.",
        "docPrepBtn": "Prepare my documents",
        "housingTitle": "Find a 12-month rental",
        "housingDesc": "Furnished mid-term rentals with contracts valid for your visa application.",
        "housingBtn": "Browse rentals",
        "insuranceTitle": "Get compliant health insurance",
        "insuranceDesc": "Nomad insurance with €30,000+ coverage that meets consulate requirements.",
        "insuranceBtn": "Get a quote",
    },
    "TaxFeedback": {
        "notTaxResident": "With {days} days in Italy you will not reach the 183-day threshold and will likely not be tax resident.",
        "isTaxResident": "With {days} days in Italy you will likely be tax resident for the year.",
        "anagrafeRisk": "Arriving from June onwards leaves little margin: delays in your Anagrafe registration can push you under 183 days.",
        "homeCountryRisk": "You could spend up to {potential} days outside Italy, above the {limit} days {country} allows before residence rules apply.",
        "usRisk": "US citizens are taxed on citizenship: you will file US returns wherever you live.",
        "ukRisk": "The UK Statutory Residence Test counts ties as well as days. Check it carefully.",
        "caRisk": "Canada looks at residential ties. Keeping a home or family there may keep you resident.",
    },
    "TaxAffiliate": {
        "taxConsultTitle": "Book a cross-border tax consultation",
        "taxConsultDesc": "An advisor maps your first year in Italy and your home country obligations.",
        "taxConsultBtn": "Book a consultation",
    },
}

IT: Catalog = {
    "CalculatorFeedback": {
        "citizenship": "I cittadini UE/SEE non hanno bisogno del visto per nomadi digitali: possono trasferirsi in Italia in regime di libera circolazione.",
        "employerLocation": "Il datore di lavoro o i clienti devono trovarsi fuori dall'Italia. Lavorare per un'azienda italiana non rientra in questo visto.",
        "criminalRecord": "Una condanna penale negli ultimi 5 anni è motivo di rifiuto automatico. Consulta un avvocato prima di presentare domanda.",
        "workProof": "Non hai prove del rapporto di lavoro da remoto (contratto di lavoro o accordi con i clienti).",
        "qualification": "Senza laurea o esperienza equivalente non rientri nella categoria di lavoratore altamente qualificato.",
        "remoteExp": "Sono richiesti almeno 6 mesi di esperienza pregressa di lavoro da remoto.",
        "contractGap": "Il contratto o gli accordi con i clienti non coprono tutti i 12 mesi del permesso.",
        "incomeLow": "Il tuo reddito (€{income}) è inferiore alla soglia richiesta (€{threshold}).",
        "dependantsPenalty": "Ciascuno dei tuoi {count} familiari a carico aumenta il reddito da dimostrare.",
        "bankStatements6m": "Solo 6 mesi di documentazione del reddito. I consolati di solito ne chiedono 12.",
        "bankStatementsLess": "Meno di 6 mesi di documentazione del reddito è un motivo frequente di rifiuto.",
        "transitory": "Un alloggio temporaneo può essere accettato, ma servirà un contratto d'affitto per l'iscrizione anagrafica.",
        "airbnb": "Gli affitti brevi non sono accettati come prova di alloggio.",
        "insurance": "Serve un'assicurazione sanitaria valida in Italia con copertura di almeno €30.000.",
        "passport": "Il passaporto deve essere valido per almeno 15 mesi (durata del permesso più 3 mesi).",
    },
    "AffiliateActions": {
        "legalTitle": "Parla con un avvocato dell'immigrazione",
        "legalDesc": "Ottieni una valutazione riservata del tuo casellario prima di fare domanda.",
        "legalBtn": "Prenota una consulenza",
        "contractReviewTitle": "Fai verificare i documenti di lavoro",
        "contractReviewDesc": "Un avvocato controlla che il contratto dimostri un rapporto di lavoro da remoto valido.",
        "contractReviewBtn": "Verifica il contratto",
        "contractDraftTitle": "Estendi il contratto a 12 mesi",
        "contractDraftDesc": "Fai redigere un contratto o accordo con i clienti conforme di 12 mesi.",
        "contractDraftBtn": "Redigi il contratto",
        "qualCheckTitle": "Verifica il tuo titolo di studio",
        "qualCheckDesc": "Richiedi la dichiarazione di comparabilità CIMEA per la tua laurea.",
        "qualCheckBtn": "Avvia la verifica",
        "cvHelpTitle": "Documenta la tua esperienza da remoto",
        "cvHelpDesc": "Trasforma la tua storia lavorativa in prove accettate dal consolato.",
        "cvHelpBtn": "Migliora il CV",
        "financeTitle": "Pianifica il reddito con un commercialista",
        "financeDesc": "Scopri come raggiungere la soglia di reddito con la tua situazione attuale.",
        "financeBtn": "Parla con un commercialista",
        "docPrepTitle": "Prepara i documenti finanziari",
        "docPrepDesc": "Fatti aiutare a raccogliere estratti conto e dichiarazioni dei redditi accettati dal consolato.",
        "docPrepBtn": "Prepara i documenti",
        "housingTitle": "Trova un affitto di 12 mesi",
        "housingDesc": "Affitti arredati di medio termine con contratti validi per la domanda di visto.",
        "housingBtn": "Cerca alloggi",
        "insuranceTitle": "Ottieni un'assicurazione conforme",
        "insuranceDesc": "Assicurazione per nomadi con copertura di oltre €30.000 conforme ai requisiti consolari.",
        "insuranceBtn": "Richiedi un preventivo",
    },
    "TaxFeedback": {
        "notTaxResident": "Con {days} giorni in Italia non raggiungerai la soglia di 183 giorni e probabilmente non sarai residente fiscale.",
        "isTaxResident": "Con {days} giorni in Italia probabilmente sarai residente fiscale per l'anno.",
        "anagrafeRisk": "Arrivando da giugno in poi il margine è minimo: ritardi nell'iscrizione all'Anagrafe possono portarti sotto i 183 giorni.",
        "homeCountryRisk": "Potresti trascorrere fino a {potential} giorni fuori dall'Italia, oltre i {limit} giorni consentiti da {country} prima che scattino le regole di residenza.",
        "usRisk": "I cittadini statunitensi sono tassati in base alla cittadinanza: dovrai presentare la dichiarazione USA ovunque vivi.",
        "ukRisk": "Lo Statutory Residence Test britannico considera i legami oltre ai giorni. Verificalo con attenzione.",
        "caRisk": "Il Canada valuta i legami di residenza. Mantenere casa o famiglia lì può lasciarti residente.",
    },
    "TaxAffiliate": {
        "taxConsultTitle": "Prenota una consulenza fiscale internazionale",
        "taxConsultDesc": "Un consulente pianifica il tuo primo anno in Italia e gli obblighi nel paese d'origine.",
        "taxConsultBtn": "Prenota una consulenza",
    },
}

CATALOGS: Dict[str, Catalog] = {
    "en": EN,
    "it": IT,
}

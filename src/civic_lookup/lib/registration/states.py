"""Per-state voter registration directory.

Covers the 50 states, the District of Columbia and the five inhabited
territories.  Deadlines are display strings; they are not interpreted.
"""

from civic_lookup.lib.registration.types import StateRegistration

STATES: tuple[StateRegistration, ...] = (
    StateRegistration(
        code="AL",
        name="Alabama",
        status_url="https://myinfo.alabamavotes.gov/VoterView",
        registration_url="https://www.sos.alabama.gov/alabama-votes/voter/register-to-vote",
        deadline="Must be received 15 days before election day",
        absentee_deadline="Application must be received 5 days before election day",
        early_voting="No early voting",
    ),
    StateRegistration(
        code="AK",
        name="Alaska",
        status_url="https://myvoterinformation.alaska.gov/",
        registration_url="https://voterregistration.alaska.gov/",
        deadline="30 days before election day",
        absentee_deadline="Received 10 days before election day",
        early_voting="15 days before election day through election day",
    ),
    StateRegistration(
        code="AZ",
        name="Arizona",
        status_url="https://my.arizona.vote/PortalList.aspx",
        registration_url="https://servicearizona.com/VoterRegistration/selectLanguage",
        deadline="29 days before election day",
        absentee_deadline="Received 11 days before election day",
        early_voting="Begins 27 days before election day",
    ),
    StateRegistration(
        code="AR",
        name="Arkansas",
        status_url="https://www.voterview.ar-nova.org/VoterView",
        registration_url="https://www.sos.arkansas.gov/elections/voter-information/",
        deadline="30 days before election day",
        absentee_deadline="7 days before election day",
        early_voting="Begins 15 days before election day",
    ),
    StateRegistration(
        code="CA",
        name="California",
        status_url="https://voterstatus.sos.ca.gov",
        registration_url="https://registertovote.ca.gov/",
        deadline="15 days before election day (same-day registration available)",
        absentee_deadline="7 days before election day",
        early_voting="Varies by county, typically 29 days before election day",
    ),
    StateRegistration(
        code="CO",
        name="Colorado",
        status_url="https://www.sos.state.co.us/voter/pages/pub/olvr/findVoterReg.xhtml",
        registration_url="https://www.sos.state.co.us/voter/pages/pub/home.xhtml",
        deadline="8 days before election day (same-day registration available)",
        absentee_deadline="All registered voters receive mail ballots",
        early_voting="Begins 15 days before election day",
    ),
    StateRegistration(
        code="CT",
        name="Connecticut",
        status_url="https://portaldir.ct.gov/sots/LookUp.aspx",
        registration_url="https://portal.ct.gov/SOTS/Election-Services/Voter-Information/Voter-Registration-Information",  # noqa: E501
        deadline="7 days before election day (same-day registration available)",
        absentee_deadline="Application received day before election day",
        early_voting="No early voting",
    ),
    StateRegistration(
        code="DE",
        name="Delaware",
        status_url="https://ivote.de.gov/voterview",
        registration_url="https://elections.delaware.gov/voter/votereg.shtml",
        deadline="Fourth Saturday before election day",
        absentee_deadline="Received by noon day before election day",
        early_voting="10 days before election day",
    ),
    StateRegistration(
        code="DC",
        name="District of Columbia",
        status_url="https://www.dcboe.org/Voters/Register-To-Vote/Check-Voter-Registration-Status",
        registration_url="https://www.dcboe.org/voters/register-to-vote/register-update-voter-registration",
        deadline="Same-day registration available",
        absentee_deadline="7 days before election day",
        early_voting="Begins 13 days before election day",
    ),
    StateRegistration(
        code="FL",
        name="Florida",
        status_url="https://registration.elections.myflorida.com/CheckVoterStatus",
        registration_url="https://registertovoteflorida.gov/",
        deadline="29 days before election day",
        absentee_deadline="Received 10 days before election day",
        early_voting="10-19 days before election day",
    ),
    StateRegistration(
        code="GA",
        name="Georgia",
        status_url="https://mvp.sos.ga.gov/s/",
        registration_url="https://georgia.gov/register-vote",
        deadline="29 days before election day",
        absentee_deadline="11 days before election day",
        early_voting="Begins fourth Monday before election day",
    ),
    StateRegistration(
        code="HI",
        name="Hawaii",
        status_url="https://olvr.hawaii.gov/",
        registration_url="https://olvr.hawaii.gov/",
        deadline="Same-day registration available",
        absentee_deadline="All registered voters receive mail ballots",
        early_voting="Begins 10 days before election day",
    ),
    StateRegistration(
        code="ID",
        name="Idaho",
        status_url="https://elections.sos.idaho.gov/ElectionLink/ElectionLink/VoterSearch.aspx",
        registration_url="https://elections.sos.idaho.gov/ElectionLink/ElectionLink/ApplicationInstructions.aspx",
        deadline="25 days before election day (same-day registration available)",
        absentee_deadline="11 days before election day",
        early_voting="Varies by county, typically begins 2-3 weeks before election day",
    ),
    StateRegistration(
        code="IL",
        name="Illinois",
        status_url="https://ova.elections.il.gov/RegistrationLookup.aspx",
        registration_url="https://ova.elections.il.gov/",
        deadline="28 days before election day (same-day registration available)",
        absentee_deadline="5 days before election day",
        early_voting="Begins 40 days before election day",
    ),
    StateRegistration(
        code="IN",
        name="Indiana",
        status_url="https://indianavoters.in.gov/",
        registration_url="https://www.in.gov/sos/elections/voter-information/register-to-vote/",
        deadline="29 days before election day",
        absentee_deadline="12 days before election day",
        early_voting="28 days before election day",
    ),
    StateRegistration(
        code="IA",
        name="Iowa",
        status_url="https://sos.iowa.gov/elections/voterreg/regtovote/search.aspx",
        registration_url="https://sos.iowa.gov/elections/voterinformation/voterregistration.html",
        deadline="15 days before election day (same-day registration available)",
        absentee_deadline="15 days before election day",
        early_voting="29 days before election day",
    ),
    StateRegistration(
        code="KS",
        name="Kansas",
        status_url="https://myvoteinfo.voteks.org/voterview",
        registration_url="https://www.kdor.ks.gov/Apps/VoterReg/Default.aspx",
        deadline="21 days before election day",
        absentee_deadline="7 days before election day",
        early_voting="Begins 20 days before election day",
    ),
    StateRegistration(
        code="KY",
        name="Kentucky",
        status_url="https://vrsws.sos.ky.gov/vic/",
        registration_url="https://vrsws.sos.ky.gov/ovrweb/",
        deadline="29 days before election day",
        absentee_deadline="7 days before election day",
        early_voting="Thursday to Saturday before election day",
    ),
    StateRegistration(
        code="LA",
        name="Louisiana",
        status_url="https://voterportal.sos.la.gov/",
        registration_url="https://www.sos.la.gov/ElectionsAndVoting/RegisterToVote/",
        deadline="30 days before election day (online 20 days)",
        absentee_deadline="4 days before election day",
        early_voting="14-7 days before election day",
    ),
    StateRegistration(
        code="ME",
        name="Maine",
        status_url="https://www.maine.gov/sos/cec/elec/data/index.html",
        registration_url="https://www.maine.gov/sos/cec/elec/voter-info/voterguide.html",
        deadline="Same-day registration available",
        absentee_deadline="3 days before election day",
        early_voting="30-45 days before election day",
    ),
    StateRegistration(
        code="MD",
        name="Maryland",
        status_url="https://voterservices.elections.maryland.gov/VoterSearch",
        registration_url="https://elections.maryland.gov/voter_registration/application.html",
        deadline="21 days before election day (same-day registration available)",
        absentee_deadline="7 days before election day",
        early_voting="8 days before election day",
    ),
    StateRegistration(
        code="MA",
        name="Massachusetts",
        status_url="https://www.sec.state.ma.us/VoterRegistrationSearch/MyVoterRegStatus.aspx",
        registration_url="https://www.sec.state.ma.us/ovr/",
        deadline="10 days before election day",
        absentee_deadline="Application received 4 days before election day",
        early_voting="11 days before election day",
    ),
    StateRegistration(
        code="MI",
        name="Michigan",
        status_url="https://mvic.sos.state.mi.us/",
        registration_url="https://mvic.sos.state.mi.us/RegisterVoter",
        deadline="15 days before election day (same-day registration available)",
        absentee_deadline="Friday before election day",
        early_voting="9 days before election day",
    ),
    StateRegistration(
        code="MN",
        name="Minnesota",
        status_url="https://mnvotes.sos.state.mn.us/VoterStatus.aspx",
        registration_url="https://mnvotes.sos.state.mn.us/VoterRegistration/VoterRegistrationMain.aspx",
        deadline="21 days before election day (same-day registration available)",
        absentee_deadline="Day before election day",
        early_voting="46 days before election day",
    ),
    StateRegistration(
        code="MS",
        name="Mississippi",
        status_url="https://www.msegov.com/sos/voter_registration/amiregistered/Search",
        registration_url="https://www.sos.ms.gov/elections-voting/voter-registration-information",
        deadline="30 days before election day",
        absentee_deadline="Varies",
        early_voting="No early voting",
    ),
    StateRegistration(
        code="MO",
        name="Missouri",
        status_url="https://voteroutreach.sos.mo.gov/portal/",
        registration_url="https://www.sos.mo.gov/elections/govotemissouri/register",
        deadline="Fourth Wednesday before election day",
        absentee_deadline="Second Wednesday before election day",
        early_voting="Varies by election",
    ),
    StateRegistration(
        code="MT",
        name="Montana",
        status_url="https://app.mt.gov/voterinfo/",
        registration_url="https://sosmt.gov/elections/vote/",
        deadline="30 days before election day (same-day registration available)",
        absentee_deadline="Day before election day",
        early_voting="30 days before election day",
    ),
    StateRegistration(
        code="NE",
        name="Nebraska",
        status_url="https://www.votercheck.necvr.ne.gov/",
        registration_url="https://www.nebraska.gov/apps-sos-voter-registration/",
        deadline="11 days before election day",
        absentee_deadline="11 days before election day",
        early_voting="30 days before election day",
    ),
    StateRegistration(
        code="NV",
        name="Nevada",
        status_url="https://www.nvsos.gov/votersearch/",
        registration_url="https://www.nvsos.gov/sosvoterservices/Registration/step1.aspx",
        deadline="Fifth Tuesday before election day (same-day registration available)",
        absentee_deadline="All registered voters receive mail ballots",
        early_voting="Third Saturday before election day",
    ),
    StateRegistration(
        code="NH",
        name="New Hampshire",
        status_url="https://app.sos.nh.gov/voterinformation",
        registration_url="https://www.sos.nh.gov/elections/voters/register-vote",
        deadline="Same-day registration available",
        absentee_deadline="Day before election day",
        early_voting="No early voting",
    ),
    StateRegistration(
        code="NJ",
        name="New Jersey",
        status_url="https://voter.svrs.nj.gov/registration-check",
        registration_url="https://voter.svrs.nj.gov/register",
        deadline="21 days before election day",
        absentee_deadline="7 days before election day",
        early_voting="10 days before election day",
    ),
    StateRegistration(
        code="NM",
        name="New Mexico",
        status_url="https://voterportal.servis.sos.state.nm.us/WhereToVote.aspx",
        registration_url="https://portal.sos.state.nm.us/OVR/WebPages/InstructionsStep1.aspx",
        deadline="28 days before election day (same-day registration available)",
        absentee_deadline="Friday before election day",
        early_voting="28 days before election day",
    ),
    StateRegistration(
        code="NY",
        name="New York",
        status_url="https://voterlookup.elections.ny.gov/",
        registration_url="https://dmv.ny.gov/more-info/electronic-voter-registration-application",
        deadline="25 days before election day",
        absentee_deadline="15 days before election day",
        early_voting="10 days before election day",
    ),
    StateRegistration(
        code="NC",
        name="North Carolina",
        status_url="https://vt.ncsbe.gov/RegLkup/",
        registration_url="https://www.ncsbe.gov/registering/how-register",
        deadline="25 days before election day (same-day registration during early voting)",
        absentee_deadline="7 days before election day",
        early_voting="19-3 days before election day",
    ),
    StateRegistration(
        code="ND",
        name="North Dakota",
        status_url="https://vip.sos.nd.gov/WhereToVote.aspx",
        registration_url="https://vip.sos.nd.gov/PortalList.aspx",
        deadline="No voter registration required",
        absentee_deadline="Day before election day",
        early_voting="15 days before election day",
    ),
    StateRegistration(
        code="OH",
        name="Ohio",
        status_url="https://voterlookup.ohiosos.gov/voterlookup.aspx",
        registration_url="https://olvr.ohiosos.gov/",
        deadline="30 days before election day",
        absentee_deadline="3 days before election day",
        early_voting="28 days before election day",
    ),
    StateRegistration(
        code="OK",
        name="Oklahoma",
        status_url="https://okvoterportal.okelections.us/",
        registration_url="https://oklahoma.gov/elections/voter-registration/register-to-vote.html",
        deadline="25 days before election day",
        absentee_deadline="Tuesday before election day",
        early_voting="Wednesday before election day",
    ),
    StateRegistration(
        code="OR",
        name="Oregon",
        status_url="https://secure.sos.state.or.us/orestar/vr/showVoterSearch.do",
        registration_url="https://secure.sos.state.or.us/orestar/vr/register.do",
        deadline="21 days before election day",
        absentee_deadline="All registered voters receive mail ballots",
        early_voting="All voting by mail",
    ),
    StateRegistration(
        code="PA",
        name="Pennsylvania",
        status_url="https://www.pavoterservices.pa.gov/pages/voterregistrationstatus.aspx",
        registration_url="https://www.pavoterservices.pa.gov/Pages/VoterRegistrationApplication.aspx",
        deadline="15 days before election day",
        absentee_deadline="7 days before election day",
        early_voting="50 days before election day (mail-in voting)",
    ),
    StateRegistration(
        code="RI",
        name="Rhode Island",
        status_url="https://vote.sos.ri.gov/Home/UpdateVoterRecord",
        registration_url="https://vote.sos.ri.gov/Home/RegistertoVote",
        deadline="30 days before election day",
        absentee_deadline="21 days before election day",
        early_voting="20 days before election day",
    ),
    StateRegistration(
        code="SC",
        name="South Carolina",
        status_url="https://info.scvotes.sc.gov/eng/voterinquiry/VoterInformationRequest.aspx",
        registration_url="https://info.scvotes.sc.gov/eng/ovr/start.aspx",
        deadline="30 days before election day",
        absentee_deadline="11 days before election day",
        early_voting="Early voting begins two weeks before election day",
    ),
    StateRegistration(
        code="SD",
        name="South Dakota",
        status_url="https://vip.sdsos.gov/VIPLogin.aspx",
        registration_url="https://sdsos.gov/elections-voting/voting/register-to-vote/default.aspx",
        deadline="15 days before election day",
        absentee_deadline="Day before election day",
        early_voting="46 days before election day",
    ),
    StateRegistration(
        code="TN",
        name="Tennessee",
        status_url="https://tnmap.tn.gov/voterlookup/",
        registration_url="https://ovr.govote.tn.gov/",
        deadline="30 days before election day",
        absentee_deadline="7 days before election day",
        early_voting="20-5 days before election day",
    ),
    StateRegistration(
        code="TX",
        name="Texas",
        status_url="https://teamrv-mvp.sos.texas.gov/MVP/mvp.do",
        registration_url="https://www.texas.gov/living-in-texas/texas-voter-registration/",
        deadline="30 days before election day",
        absentee_deadline="11 days before election day",
        early_voting="17-4 days before election day",
    ),
    StateRegistration(
        code="UT",
        name="Utah",
        status_url="https://votesearch.utah.gov/voter-search/search/search-by-voter/voter-info",
        registration_url="https://secure.utah.gov/voterreg/index.html",
        deadline="11 days before election day (same-day registration available)",
        absentee_deadline="All registered voters receive mail ballots",
        early_voting="14 days before election day",
    ),
    StateRegistration(
        code="VT",
        name="Vermont",
        status_url="https://mvp.vermont.gov/",
        registration_url="https://olvr.vermont.gov/",
        deadline="Same-day registration available",
        absentee_deadline="Day before election day",
        early_voting="45 days before election day",
    ),
    StateRegistration(
        code="VA",
        name="Virginia",
        status_url="https://vote.elections.virginia.gov/VoterInformation",
        registration_url="https://www.elections.virginia.gov/registration/how-to-register/",
        deadline="22 days before election day",
        absentee_deadline="11 days before election day",
        early_voting="45 days before election day",
    ),
    StateRegistration(
        code="WA",
        name="Washington",
        status_url="https://voter.votewa.gov/WhereToVote.aspx",
        registration_url="https://voter.votewa.gov/WhereToVote.aspx",
        deadline="8 days before election day (same-day registration available)",
        absentee_deadline="All registered voters receive mail ballots",
        early_voting="All voting by mail",
    ),
    StateRegistration(
        code="WV",
        name="West Virginia",
        status_url="https://ovr.sos.wv.gov/Register/Landing",
        registration_url="https://ovr.sos.wv.gov/Register/Landing",
        deadline="21 days before election day",
        absentee_deadline="6 days before election day",
        early_voting="13-3 days before election day",
    ),
    StateRegistration(
        code="WI",
        name="Wisconsin",
        status_url="https://myvote.wi.gov/en-us/My-Voter-Info",
        registration_url="https://myvote.wi.gov/en-us/Register-To-Vote",
        deadline="20 days before election day (same-day registration available)",
        absentee_deadline="Thursday before election day",
        early_voting="Varies by municipality, typically 2 weeks before election day",
    ),
    StateRegistration(
        code="WY",
        name="Wyoming",
        status_url="https://sos.wyo.gov/Elections/Docs/WYCountyClerks.pdf",
        registration_url="https://sos.wyo.gov/Elections/State/RegisteringToVote.aspx",
        deadline="14 days before election day (same-day registration available)",
        absentee_deadline="Day before election day",
        early_voting="40 days before election day",
    ),
    StateRegistration(
        code="PR",
        name="Puerto Rico",
        status_url="https://consulta.ceepur.org/",
        registration_url="https://ww2.ceepur.org/Home/Register",
        deadline="50 days before election day",
        absentee_deadline="Varies",
        early_voting="Varies",
    ),
    StateRegistration(
        code="GU",
        name="Guam",
        status_url="https://gec.guam.gov/validate/",
        registration_url="https://gec.guam.gov/register",
        deadline="10 working days before election day",
        absentee_deadline="7 days before election day",
        early_voting="Varies",
    ),
    StateRegistration(
        code="VI",
        name="U.S. Virgin Islands",
        status_url="https://www.vivote.gov/voters/lookup/",
        registration_url="https://www.vivote.gov/voters/register-to-vote/",
        deadline="30 days before election day",
        absentee_deadline="Varies",
        early_voting="Varies",
    ),
    StateRegistration(
        code="AS",
        name="American Samoa",
        status_url="https://aselectionoffice.gov/",
        registration_url="https://aselectionoffice.gov/",
        deadline="29 days before election day",
        absentee_deadline="Varies",
        early_voting="Varies",
    ),
    StateRegistration(
        code="MP",
        name="Northern Mariana Islands",
        status_url="https://www.votecnmi.gov.mp/",
        registration_url="https://www.votecnmi.gov.mp/",
        deadline="60 days before election day",
        absentee_deadline="Varies",
        early_voting="Varies",
    ),
)
